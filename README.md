# raykit

Building blocks for a small ray tracer. The package is plain Python and has
no third-party dependencies.

## What is inside

- `raykit.model.ModelOBJ` loads a Wavefront OBJ file and the MTL material
  library that the file names in an `mtllib` statement. The library is looked
  up in the OBJ file's directory. Polygonal faces are fanned into triangles,
  and identical vertices are shared. Normals are generated when the file has
  none, or always when `rebuild_normals=True` is passed. Tangents are
  generated when a library material names a bump map (`map_bump`). Triangles
  are grouped into meshes by material, and the meshes are ordered from most
  opaque to least opaque.
- `raykit.objparser.parse_obj(text, material_loader)` parses OBJ text into an
  `ObjGeometry`, which holds the vertices, indices, per-triangle material
  indices and materials. `VertexCache` is the de-duplicating vertex buffer
  that it uses.
- `raykit.mtl.parse_materials(text)` and `raykit.mtl.load_materials(path)`
  read MTL libraries. `Ns` is scaled from 0..1000 down to 0..1. `Tr` is
  stored as an opacity and `d` is stored as given. `illum 1` clears the
  specular colour.
- `raykit.geometry` holds the mesh operations: `compute_bounds` (which
  returns a `Bounds`), `scale_vertices`, `reverse_winding`,
  `generate_normals`, `generate_tangents` and `build_meshes`.
- `raykit.meshdata` defines the `Material`, `Vertex` and `Mesh` records, and
  `default_material()`.
- `raykit.pngtypes` describes PNG data. It has the enumerations `ColorType`,
  `ColorMask`, `FillerType`, `RgbToGrayErrorAction`, `InterlaceType`,
  `CompressionType`, `FilterType` and `Chunk`. Its pixel types are
  `RgbPixel`, `Rgb16Pixel`, `IndexPixel` and `PackedIndexPixel`, and `Color`
  is a palette entry. It also has `pixel_traits()`, `alpha_filler()` and the
  errors `PngError` and `StdError`.
- `raykit.image_info.ImageInfo` holds the header of a PNG image: its size,
  colour type, bit depth, interlace, compression and filter methods, palette
  and transparency. `make_image_info(pixel_type)` fills in the colour type
  and bit depth for a pixel type.
- `raykit.scene` provides `SceneObjectType` and the abstract base class
  `SceneElementCreator`. A subclass implements `instance(element)` to build a
  scene object from a `(name, subtree)` pair.
- `raykit.graphics_args.GraphicsArgs` handles the renderer's command-line
  options: output and window size, aspect ratio, depth of field, number of
  CPUs, rays per pixel, recursion depth, BVH split method, and input and
  output file names.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Loading a model

```python
from raykit.model import ModelOBJ

model = ModelOBJ()
model.import_file("scenes/bunny.obj", rebuild_normals=False)
model.normalize(scale_to=1.0, center=True)
print(model.number_of_triangles, model.radius, model.center)
```

Errors are reported as follows:

- `import_file` raises `OSError` if the OBJ file cannot be read.
- `import_file` raises `ValueError` for a face that has fewer than three
  vertices or that refers to data missing from the file.
- If the MTL library cannot be read, the single default material is used
  instead.
- `normalize` raises `ValueError` for a model with zero extent.

After `normalize`, the model's largest extent is `scale_to`, and with
`center=True` the model is centred on the origin. `reverse_winding()` swaps
the second and third index of every triangle and negates the normals and
tangents. `destroy()` clears everything the model has loaded.

## Command-line options

```
raykit-args -w 640 -h 480 -r 4 -i scene.obj -o out.png -v
```

The command parses the renderer options and stops. With `-v` it prints each
setting as it is applied. `raykit-args -?` (or `--help`) prints the usage and
exits with status 0. Note that `-h` sets the height; it does not ask for
help. An invalid command line prints the error and the usage to standard
error, and the command exits with status 2.

From Python:

```python
from raykit.graphics_args import GraphicsArgs

args = GraphicsArgs()
args.process(["-w", "320", "-h", "240", "--rpp", "8"])
print(args.width, args.height, args.aspect_ratio, args.rpp)
```

If `--aspect` is not given, the aspect ratio is width divided by height.
Depth of field is turned on only when `--depth` gives a focus distance.

## What it does not do

raykit has no renderer. It does not trace rays, build a BVH or open a preview
window. The command-line options are parsed and stored, and nothing else acts
on them. raykit also cannot read or write PNG files: `raykit.pngtypes` and
`raykit.image_info` only describe PNG images, and contain no encoder or
decoder.