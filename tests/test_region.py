import unittest
import tilenames.region as region
from tilenames.region import Region
from tilenames.util import BoundingBox


class TestRegion(unittest.TestCase):

    def test_intersects(self):
        r = Region(BoundingBox(-10, -10, 10, 10), (2, 5))
        self.assertTrue(r.intersects(BoundingBox(5, 5, 20, 20), 2))
        self.assertTrue(r.intersects(BoundingBox(5, 5, 20, 20), 4))
        # zoom range excludes the max.
        self.assertFalse(r.intersects(BoundingBox(5, 5, 20, 20), 5))
        self.assertFalse(r.intersects(BoundingBox(5, 5, 20, 20), 1))
        self.assertFalse(r.intersects(BoundingBox(11, 11, 20, 20), 3))

    def test_whole_world(self):
        r = Region(BoundingBox(-180, -90, 180, 90), (0, 3))
        tiles = list(r.tiles())
        self.assertEqual(len(tiles), 1 + 4 + 16)
        self.assertIn((0, 0, 0), tiles)
        self.assertIn((2, 3, 3), tiles)

    def test_tile_range(self):
        r = Region(BoundingBox(-180, -90, 180, 90), (0, 3))
        self.assertEqual(r.tile_range(2), (0, 0, 3, 3))

        r = Region(BoundingBox(14.016667, 42.683333, 14.016667, 42.683333),
                   (13, 14))
        self.assertEqual(r.tile_range(13), (4414, 3019, 4414, 3019))
        self.assertEqual(list(r.tiles()), [(13, 4414, 3019)])

    def test_generate_tiles(self):
        regions = [
            Region(BoundingBox(-124.56, 32.4, -114.15, 42.03), [8, 10])
        ]
        expected = set([
            (8, 41, 99),
            (8, 43, 98)
        ])
        tiles = region.generate_tiles(regions)
        self.assertEqual(expected - tiles, set([]))

    def test_overlapping_regions(self):
        box = BoundingBox(0.0, 0.0, 10.0, 10.0)
        once = region.generate_tiles([Region(box, (4, 6))])
        twice = region.generate_tiles([Region(box, (4, 6)),
                                       Region(box, (5, 6))])
        self.assertEqual(once, twice)
