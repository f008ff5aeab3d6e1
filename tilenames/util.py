class BoundingBox(object):
    """
    An axis-aligned box, as (left, bottom, right, top). Whether that is in
    degrees or metres is up to the caller.
    """

    def __init__(self, left, bottom, right, top):
        self.bounds = (left, bottom, right, top)

    @classmethod
    def from_dict(cls, box):
        """
        Builds a box from a mapping with `left`, `bottom`, `right` and `top`
        keys, as found in the config file.
        """

        return cls(box['left'], box['bottom'], box['right'], box['top'])

    def __eq__(a, b):
        return isinstance(b, type(a)) and \
            a.bounds == b.bounds

    def __hash__(self):
        return hash(self.bounds)

    def __repr__(self):
        return 'BoundingBox(%r, %r, %r, %r)' % self.bounds

    def intersects(self, other):
        if self.bounds[0] > other.bounds[2]:
            return False
        if self.bounds[1] > other.bounds[3]:
            return False
        if self.bounds[2] < other.bounds[0]:
            return False
        if self.bounds[3] < other.bounds[1]:
            return False
        return True
