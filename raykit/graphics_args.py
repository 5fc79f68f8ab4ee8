"""Command-line options shared by the renderers."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence

DEFAULT_WINDOW_SIZE = 200


class GraphicsArgsError(ValueError):
    """Raised when the command line cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise GraphicsArgsError(message)


_NONE, _STRING, _INT, _FLOAT = "none", "string", "int", "float"

_OPTIONS = (
    ("help", "help/usage information", _NONE, "?"),
    ("verbose", "turn on verbose output", _NONE, "v"),
    ("inputfile", "input file name to use", _STRING, "i"),
    ("outputfile", "output file name to use", _STRING, "o"),
    ("numcpus", "num of cores to use", _INT, "n"),
    ("width", "width of output image (default is 100)", _INT, "w"),
    ("height", "height of output image (default is 100)", _INT, "h"),
    ("aspect", "aspect ratio in width/height of image (default is 1)", _FLOAT, "a"),
    ("depth", "depth of field focus distance (default is 0.0 or OFF)", _FLOAT, "d"),
    ("rpp", "rays per pixel (default is 1)", _INT, "r"),
    ("recursionDepth", "recursion depth (default is 4)", _INT, "k"),
    ("split", "split method for bvh construction (default is objectMedian)", _STRING, "s"),
    ("winwidth", "width of window (if using preview)", _INT, "x"),
    ("winheight", "height of window (if using preview)", _INT, "y"),
)

_CONVERTERS = {_STRING: str, _INT: int, _FLOAT: float}


def _build_parser() -> _Parser:
    parser = _Parser(prog="raykit", add_help=False)
    for name, description, kind, short in _OPTIONS:
        flags = (f"-{short}", f"--{name}")
        if kind == _NONE:
            parser.add_argument(*flags, dest=name, action="store_true", help=description)
        else:
            parser.add_argument(
                *flags, dest=name, type=_CONVERTERS[kind], default=None, help=description
            )
    return parser


@dataclass
class GraphicsArgs:
    """Rendering settings, filled in from the command line by ``process``."""

    verbose: bool = False
    window_width: int = DEFAULT_WINDOW_SIZE
    window_height: int = DEFAULT_WINDOW_SIZE
    width: int = DEFAULT_WINDOW_SIZE
    height: int = DEFAULT_WINDOW_SIZE
    aspect_ratio: float = 1.0
    use_shadow: bool = True
    bg_color: tuple[float, float, float] = (0.0, 0.0, 0.0)
    use_depth_of_field: bool = False
    depth_of_field_distance: float = 0.0
    num_cpus: int = 1
    rpp: int = 1
    recursion_depth: int = 4
    split_method: str = "objectMedian"
    input_file_name: str = ""
    output_file_name: str = ""
    _parser: _Parser = field(default_factory=_build_parser, init=False, repr=False, compare=False)

    def usage(self) -> str:
        """Return the usage text listing every option."""
        return self._parser.format_help()

    def process(self, argv: Optional[Sequence[str]] = None) -> None:
        """Parse the arguments (without the program name) into these settings.

        With ``--help`` the usage is printed and the process exits with status 0.
        """
        if argv is None:
            argv = sys.argv[1:]
        opts = vars(self._parser.parse_args(list(argv)))

        if opts["help"]:
            print(self.usage())
            raise SystemExit(0)

        self.verbose = opts["verbose"]
        self._report("Verbose Output: ON", enabled=self.verbose)

        def take(option: str, attr: str, label: str) -> bool:
            value = opts[option]
            if value is not None:
                setattr(self, attr, value)
            self._report(f"Setting {label} to {self._fmt(getattr(self, attr))}")
            return value is not None

        take("width", "width", "width")
        take("height", "height", "height")
        take("winwidth", "window_width", "Window Width")
        take("winheight", "window_height", "Window Height")

        self.aspect_ratio = self._ratio(self.width, self.height)
        take("aspect", "aspect_ratio", "aspect ratio")

        if opts["depth"] is not None:
            self.depth_of_field_distance = opts["depth"]
            self.use_depth_of_field = True
            self._report(
                f"Setting depth of field distance to {self._fmt(self.depth_of_field_distance)}"
            )

        take("numcpus", "num_cpus", "num cpus")
        take("rpp", "rpp", "rays per pixel")
        take("recursionDepth", "recursion_depth", "recursionDepth")
        take("split", "split_method", "split method")
        take("inputfile", "input_file_name", "inputFileName")
        take("outputfile", "output_file_name", "outputFileName")

    def _report(self, message: str, enabled: Optional[bool] = None) -> None:
        if self.verbose if enabled is None else enabled:
            print(message)

    @staticmethod
    def _fmt(value: object) -> str:
        return f"{value:g}" if isinstance(value, float) else str(value)

    @staticmethod
    def _ratio(width: int, height: int) -> float:
        if height == 0:
            if width == 0:
                return math.nan
            return math.copysign(math.inf, width)
        return width / height


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the rendering options from the command line."""
    args = GraphicsArgs()
    try:
        args.process(argv)
    except GraphicsArgsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        print(args.usage(), file=sys.stderr)
        return 2
    return 0