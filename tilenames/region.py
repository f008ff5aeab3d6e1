from tilenames.mercator import lonlat_to_tile
from tilenames.policy import clamp_latitude, clamp_tile
import logging


class Region(object):
    """
    Represents a selection of space, as a lon/lat bounding box, and a range
    of zooms. Any tiles at those zooms which touch the box are part of the
    region.

    Note that the zoom range is *exclusive* of the max zoom.
    """

    def __init__(self, bbox, zoom_range):
        self.bbox = bbox
        self.zoom_range = tuple(zoom_range)

    def intersects(self, bbox, zoom):
        return self.bbox.intersects(bbox) and \
            zoom >= self.zoom_range[0] and \
            zoom < self.zoom_range[1]

    def tile_range(self, zoom):
        """
        Returns the inclusive (min_x, min_y, max_x, max_y) of the tiles
        covering the region at `zoom`, clamped to the grid.
        """

        left, bottom, right, top = self.bbox.bounds

        # the top-left corner of the box gives the smallest indices, since y
        # increases southwards.
        lx, ly = clamp_tile(
            *lonlat_to_tile(left, clamp_latitude(top), zoom), zoom=zoom)
        ux, uy = clamp_tile(
            *lonlat_to_tile(right, clamp_latitude(bottom), zoom), zoom=zoom)
        return (lx, ly, ux, uy)

    def tiles(self):
        """
        Generates (z, x, y) for every tile in the region.
        """

        for z in range(*self.zoom_range):
            lx, ly, ux, uy = self.tile_range(z)
            for x in range(lx, ux + 1):
                for y in range(ly, uy + 1):
                    yield (z, x, y)


def generate_tiles(regions):
    """
    The set of (z, x, y) covering all the regions. Regions often overlap, so
    duplicates are removed.
    """

    logger = logging.getLogger('region')
    tiles = set()

    for r in regions:
        tiles.update(r.tiles())

    logger.info("Generated %d tiles from %d regions." % (len(tiles),
                                                        len(regions)))
    return tiles
