import enum
from typing import Union

from .pattern import plan_pattern
from .raster import render_png
from .seed_digest import Seed, derive_digest
from .vector import render_svg


class OutputFormat(str, enum.Enum):
    PNG = "png"
    SVG = "svg"

    @property
    def mimetype(self) -> str:
        return f"image/{self.value}"


_SERIALIZERS = {
    OutputFormat.PNG: render_png,
    OutputFormat.SVG: render_svg,
}


def render(digest: bytes, fmt: Union[OutputFormat, str] = OutputFormat.PNG) -> bytes:
    fmt = OutputFormat(fmt)
    return _SERIALIZERS[fmt](plan_pattern(digest))


def generate_pattern(seed: Seed, fmt: Union[OutputFormat, str] = OutputFormat.PNG) -> bytes:
    return render(derive_digest(seed), fmt)
