import tilenames.mercator as mercator
import tilenames.policy as policy
import logging


class TileGrid(object):
    """
    The tile grid with a fixed policy for coordinates which fall off its
    edges, and a fixed tile size for pixel positions.

    The module-level functions in `tilenames.mercator` always extrapolate.
    This wraps them for callers who want canonical tile indices without
    having to remember to clamp or wrap each result.
    """

    def __init__(self, options={}):
        self.policy = policy.check_policy(
            options.get('policy', policy.EXTRAPOLATE))
        self.tile_size = options.get('tile_size', 256)
        mercator.check_tile_size(self.tile_size)

    def _normalise(self, x, y, zoom):
        nx, ny = policy.apply_policy(self.policy, x, y, zoom)
        if (nx, ny) != (x, y):
            logger = logging.getLogger('grid')
            logger.debug("Moved tile %r onto the grid as %r using %r policy."
                         % (mercator.tile_name(zoom, x, y),
                            mercator.tile_name(zoom, nx, ny), self.policy))
        return (nx, ny)

    def lonlat_to_tile(self, lon, lat, zoom):
        mercator.check_lonlat(lon, lat)
        if self.policy == policy.WRAP:
            lon = policy.wrap_longitude(lon)
        x, y = mercator.lonlat_to_tile(lon, lat, zoom)
        return self._normalise(x, y, zoom)

    def lonlat_to_pixel(self, lon, lat, zoom):
        # poles and non-finite values are rejected, not clamped.
        mercator.check_lonlat(lon, lat)
        if self.policy == policy.WRAP:
            lon = policy.wrap_longitude(lon)
        elif self.policy == policy.CLAMP:
            lon = min(max(lon, -180.0), 180.0)
            lat = policy.clamp_latitude(lat)
        return mercator.lonlat_to_pixel(lon, lat, zoom, self.tile_size)

    def tile_to_lonlat(self, x, y, zoom):
        return mercator.tile_to_lonlat(*self._normalise(x, y, zoom),
                                       zoom=zoom)

    def latlon_bbox(self, x, y, zoom):
        return mercator.latlon_bbox(*self._normalise(x, y, zoom), zoom=zoom)

    def mercator_bbox(self, x, y, zoom):
        return mercator.mercator_bbox(*self._normalise(x, y, zoom),
                                      zoom=zoom)

    def max_resolution(self, x, y, zoom):
        """
        The larger of the tile's width and height per pixel, in degrees.
        """

        bbox = self.latlon_bbox(x, y, zoom).bounds
        return max((bbox[2] - bbox[0]) / self.tile_size,
                   (bbox[3] - bbox[1]) / self.tile_size)


def create(options):
    return TileGrid(options)
