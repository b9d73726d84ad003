# imgloader

imgloader loads images as plain Python pixel grids and writes them back out.
A grayscale image is a list of rows, and each row is a list of ints from 0 to 255.
An RGB image is a list of rows of `(r, g, b)` tuples.
The width and height come from the nesting. Every row must have the same length.
Images are read and written with Pillow.

## Install

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Loading and saving

All functions are in `imgloader.data_loader`.

```python
from imgloader.data_loader import load_gray, load_rgb, dump_gray, dump_rgb

gray = load_gray("photo.png")
rgb = load_rgb("photo.png")

dump_gray(gray, "gray.jpg")
dump_rgb(rgb, "copy.jpg")
```

- `load_gray(filename)` returns a one-channel image unchanged.
  It converts an RGB or RGBA image to luminance with `Y = 0.2126 R + 0.7152 G + 0.0722 B`, and the result is truncated to an int.
  A grayscale image that has an alpha channel raises `ValueError`.
- `load_rgb(filename)` returns the first three channels of an RGB or RGBA image, so alpha is dropped.
  An image with fewer than three channels raises `ValueError`.
- Both loaders raise `FileNotFoundError` if the file does not exist.
- `dump_gray(pixels, filename)` and `dump_rgb(pixels, filename)` save an image.
  The file extension decides the format.
  Each value is stored as its low 8 bits.
  An empty image or rows of different lengths raise `ValueError`.

## Displaying

- `display_gray_x_server(pixels)` and `display_rgb_x_server(pixels)` open the image through Pillow's `Image.show`, with the title "Loaded Image".
- `gray_ascii(pixels)` and `rgb_ascii(pixels)` return the image as ASCII art.
  They use the shades ` .-+#@` and print each pixel as two characters.
  `rgb_ascii` uses the integer mean of the three channels.
  An intensity of exactly 255 maps one step past `@`, to a NUL character.
  An intensity outside 0..255 raises `ValueError`.
- `display_gray_ascii(pixels, stream=None)` and `display_rgb_ascii(pixels, stream=None)` write that art to `stream`. The default is standard output.
- `display_gray_cmd(filename, viewer=DEFAULT_VIEWER)` and `display_rgb_cmd(filename, viewer=DEFAULT_VIEWER)` run an external terminal image viewer on an existing file and return its exit status.
  The default viewer path is `./third-party/catimg/bin/catimg`.

## Listing a directory

```python
from imgloader.data_loader import list_directory

for path in list_directory("Image-Folder"):
    print(path)
```

`list_directory(directory)` returns `"<directory>/<name>"` for every entry, in the order the operating system gives them.
A missing directory raises `OSError`.

## Demo

```
imgloader-demo [folder] [--output-dir DIR] [--viewer PATH] [--no-window] [--no-viewer]
```

The demo expects `truck.png` and `lena.jpg` in `folder`. The default folder is `Image-Folder`. It runs these steps:

1. Loads `truck.png` as grayscale, saves it as `pixels1.jpg`, shows it, prints it as ASCII art, and runs the viewer.
2. Loads `lena.jpg` as grayscale, saves it as `pixels2.jpg`, shows it, and runs the viewer.
3. Loads `truck.png` as RGB, saves it as `pixels3.jpg`, shows it, prints it as ASCII art, and runs the viewer.
4. Lists the folder.

The saved files go to `--output-dir`, which defaults to the current directory.
`--no-window` skips the windows and `--no-viewer` skips the terminal viewer.
On an I/O or format error the demo prints the message to standard error and exits with status 1.

## What it does not do

- No sample images are included. Supply your own folder with `truck.png` and `lena.jpg` to run the demo.
- No terminal image viewer is included. Point `--viewer` (or the `viewer` argument) at one you have installed, or use `--no-viewer`.
- The package only loads, saves, shows and lists images. It does not filter, transform or otherwise process them.