import pytest
from PIL import Image

from editopia.session import EditSession


def make_image(pixels, width, height):
    img = Image.new("RGB", (width, height))
    img.putdata(pixels)
    return img


@pytest.fixture
def quad():
    """2x2: красный, зелёный, синий, белый."""
    return make_image([(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 255)], 2, 2)


@pytest.fixture
def photo():
    """Небольшое «фото» с разными оттенками."""
    pixels = [((x * 37) % 256, (y * 53) % 256, ((x + y) * 29) % 256)
              for y in range(6) for x in range(8)]
    return make_image(pixels, 8, 6)


@pytest.fixture
def session(photo):
    s = EditSession()
    s.load(photo, path="/photos/beach.png")
    return s
