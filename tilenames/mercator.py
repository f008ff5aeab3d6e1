from tilenames.util import BoundingBox
import numbers
import math
import re


MERCATOR_WORLD_SIZE = 40075016.68


# the latitude at which the square spherical mercator world ends, i.e: the
# latitude of the top edge of tile 0/0/0.
MAX_LATITUDE = 85.0511287798066


# beyond this the grid size no longer fits in a float.
MAX_ZOOM = 1023


TILE_NAME_PATTERN = re.compile(r'^([0-9]+)/([0-9]+)/([0-9]+)\Z')


class DomainError(ValueError):
    """
    Raised when an input lies outside the domain of the projection, for
    example a latitude at a pole or a negative zoom.
    """
    pass


def check_zoom(zoom):
    if isinstance(zoom, bool) or not isinstance(zoom, numbers.Integral):
        raise DomainError("Zoom must be an integer, got %r." % (zoom,))
    if zoom < 0:
        raise DomainError("Zoom must not be negative, got %r." % (zoom,))
    if zoom > MAX_ZOOM:
        raise DomainError("Zoom must be at most %d, got %r."
                          % (MAX_ZOOM, zoom))


def check_lonlat(lon, lat):
    if not math.isfinite(lon):
        raise DomainError("Longitude must be finite, got %r." % (lon,))
    # written so that NaN fails the check as well.
    if not (-90.0 < lat < 90.0):
        raise DomainError("Latitude must lie strictly between -90 and 90, "
                          "got %r." % (lat,))


def num_tiles(zoom):
    """
    Number of tiles along each side of the grid at `zoom`.
    """

    check_zoom(zoom)
    return 1 << zoom


def lonlat_to_fractional_tile(lon, lat, zoom):
    """
    Projects lon/lat in degrees onto the tile grid at `zoom`, without
    rounding down. The integer part is the tile, the fractional part is the
    position within it.

    Nothing is clamped: longitudes outside [-180, 180] and latitudes beyond
    the mercator limit give positions off the edge of the grid.
    """

    check_zoom(zoom)
    check_lonlat(lon, lat)

    lat_rad = math.radians(lat)
    extent = float(1 << zoom)
    x = (lon + 180.0) / 360.0 * extent
    y = (1.0 - math.log(math.tan(lat_rad) + 1.0 / math.cos(lat_rad)) /
         math.pi) / 2.0 * extent
    return (x, y)


def lonlat_to_tile(lon, lat, zoom):
    """
    Returns the (x, y) of the tile containing lon/lat at `zoom`. See
    `lonlat_to_fractional_tile` for the handling of out-of-range inputs.
    """

    fx, fy = lonlat_to_fractional_tile(lon, lat, zoom)
    return (int(math.floor(fx)), int(math.floor(fy)))


def check_tile_size(tile_size):
    if isinstance(tile_size, bool) or \
       not isinstance(tile_size, numbers.Integral) or tile_size <= 0:
        raise DomainError("Tile size must be a positive integer, got %r."
                          % (tile_size,))


def lonlat_to_pixel(lon, lat, zoom, tile_size=256):
    check_tile_size(tile_size)
    fx, fy = lonlat_to_fractional_tile(lon, lat, zoom)
    return (fx * tile_size, fy * tile_size)


def _gudermannian(t):
    # sinh overflows long before atan stops being able to tell the
    # difference, so past that point the answer is the limit itself.
    try:
        return math.atan(math.sinh(t))
    except OverflowError:
        return math.copysign(math.pi / 2.0, t)


def _unproject(x, y, extent):
    lon = x / extent * 360.0 - 180.0
    lat = math.degrees(_gudermannian(math.pi * (1.0 - 2.0 * y / extent)))
    return (lon, lat)


def tile_to_lonlat(x, y, zoom):
    """
    Returns the lon/lat in degrees of the north-west (top-left) corner of
    tile x, y at `zoom`.

    Indices outside the grid are extrapolated rather than rejected; the
    longitude continues linearly and the latitude tends towards +/-90.
    """

    check_zoom(zoom)
    return _unproject(x, y, float(1 << zoom))


def tile_center(x, y, zoom):
    check_zoom(zoom)
    return _unproject(x + 0.5, y + 0.5, float(1 << zoom))


def latlon_bbox(x, y, zoom):
    """
    Bounding box of the tile in degrees, as (west, south, east, north).
    """

    west, north = tile_to_lonlat(x, y, zoom)
    east, south = tile_to_lonlat(x + 1, y + 1, zoom)
    return BoundingBox(west, south, east, north)


def mercator_bbox(x, y, zoom):
    """
    Bounding box of the tile in spherical mercator (EPSG:3857) metres.
    """

    extent = float(num_tiles(zoom))
    return BoundingBox(
        MERCATOR_WORLD_SIZE * (x / extent - 0.5),
        MERCATOR_WORLD_SIZE * (0.5 - (y + 1) / extent),
        MERCATOR_WORLD_SIZE * ((x + 1) / extent - 0.5),
        MERCATOR_WORLD_SIZE * (0.5 - y / extent))


def zoom_in(x, y):
    """
    The four tiles which tile x, y splits into at the next zoom level, in
    the order top-left, top-right, bottom-left, bottom-right:

      +--------+--------+
      | x1, y1 | x2, y1 |
      +--------+--------+
      | x1, y2 | x2, y2 |
      +--------+--------+

    The zoom itself doesn't matter, so it isn't a parameter.
    """

    x1 = 2 * x
    y1 = 2 * y
    return ((x1, y1), (x1 + 1, y1), (x1, y1 + 1), (x1 + 1, y1 + 1))


def zoom_out(x, y):
    """
    The tile at the previous zoom level which contains tile x, y.
    """

    return (x // 2, y // 2)


def tile_name(z, x, y):
    return '%d/%d/%d' % (z, x, y)


def parse_tile_name(name):
    m = TILE_NAME_PATTERN.match(name)
    if m:
        return (int(m.group(1)), int(m.group(2)), int(m.group(3)))
    return None
