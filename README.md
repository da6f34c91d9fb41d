# raysketch

raysketch is a small Monte Carlo path tracer. It writes plain-text PPM (P3) images. It
also has two image tools that work together. The first is a Sobel edge detector. The
second is a circle packer that turns an edge map into a list of sphere definitions.

## Installation

```
pip install .
```

The only runtime dependency is numpy. The FFT-based convolution and the image arrays use it.

## Rendering the demo scene

```
raysketch-render > image.ppm
```

The demo scene has four spheres on a large ground sphere:

- a yellow diffuse ground,
- a blue diffuse sphere in the centre,
- a metal sphere on the left with fuzz 0.3,
- a gold metal sphere on the right with fuzz 1.0.

The image is 400 pixels wide at 16:9, with 100 samples per pixel and a bounce depth of 50.
It goes to standard output. The remaining scanlines are reported on standard error. The
command takes no options.

## Building your own scene

```python
import sys

from raysketch.camera import Camera
from raysketch.hittable import HittableList
from raysketch.material import Lambertian, Metal
from raysketch.sphere import Sphere
from raysketch.vec3 import Vec3

world = HittableList()
world.add(Sphere(Vec3(0, -100.5, -1), 100, Lambertian(Vec3(0.8, 0.8, 0.0))))
world.add(Sphere(Vec3(0, 0, -1), 0.5, Metal(Vec3(0.8, 0.6, 0.2), 0.3)))

cam = Camera(aspect_ratio=16 / 9, image_width=200, samples_per_pixel=20, max_depth=10)

with open("scene.ppm", "w") as out:
    cam.render(world, out, sys.stderr)
```

Notes on the scene API:

- **Camera.** The camera sits at the origin and looks down the negative z axis. Its
  defaults are aspect ratio 1.0, width 100, 10 samples per pixel and depth 10. The image
  height is the width divided by the aspect ratio, and it is at least 1. If you leave out
  `out` or `log`, `render` writes to standard output or standard error.
- **Materials.** `Lambertian` scatters diffusely. `Metal` reflects, and its fuzz is capped
  at 1. A plain `Material` absorbs every ray.
- **Hits.** `Hittable.hit` returns a `HitRecord`, or `None` when nothing is hit.
  `HittableList` reports the closest hit.
- **Demo world.** `raysketch.scene.build_world()` returns the demo world, if you want to
  start from it.

## Edge detection

```
raysketch-edges input.ppm edges.ppm
```

This reads a P3 image and runs a Sobel filter on each colour channel. In the output, a
channel is set to the image's `maxval` wherever its gradient magnitude is greater than
0.25. Elsewhere it is 0. The output has the same size as the input.

If you leave out the input file, the image is read from standard input. If you leave out
the output file, the result goes to `output.ppm`. On a read or write error the command
prints the error and exits with status 1.

From Python, you have three entry points:

- `raysketch.edges.detect_edges` works on a `raysketch.matrix.Matrix` and returns the
  full-size gradient magnitude.
- `raysketch.edges.edge_image` works on a `raysketch.ppm.PpmImage` and takes an optional
  threshold.
- `raysketch.ppm` reads and writes P3 images with `read_ppm`, `read_ppm_header` and
  `write_ppm`.

`Matrix` also offers the following:

- `convolve2d` gives a full 2D convolution.
- `Matrix.read` reads whitespace-separated text: `rows cols`, then the elements.
- `from_ppm_channel` reads one channel of a pixel stream.
- `save_as_ppm_channel` writes the matrix as pixels in one channel.

## Circles from edges

```
raysketch-circles edges.ppm original.ppm spheres.txt
```

This command packs circles between the edges of `edges.ppm`:

- **Edge mask.** A pixel counts as an edge when the integer mean of its three samples is
  above 30.
- **Placement.** Candidate centres lie on an 8-pixel grid. At each free centre the largest
  circle that fits is placed. Radii run from a sixth of the smaller image side down to 6
  pixels. A circle must lie fully inside the image and must not overlap edges or earlier
  circles.
- **Colour.** Each circle takes the average colour of `original.ppm` under it, divided
  by 255.
- **Output.** The circles are written one per line in viewport coordinates, as
  `world.add(make_shared<sphere>(...))` statements at z = -1. The viewport is 2.0 units
  high.
- **Errors.** The two images must have the same size. Otherwise, and on any read or write
  error, the command prints the error and exits with status 1.

In Python, `raysketch.circles.find_circles(edges, original)` takes two `PpmImage` values
and returns a list of `Circle` values. `format_spheres` renders that list as text. The
building blocks are also public: `threshold_edges`, `can_place`, `mark_circle` and
`avg_color`.

## What raysketch does not do

- **No reader for sphere definitions.** raysketch cannot read the definitions that
  `raysketch-circles` writes back in. To render them, build the scene yourself with
  `Sphere` and `Lambertian`.
- **Plain PPM only.** Images are read and written as plain P3 files only. There are no
  other image formats and no viewer.