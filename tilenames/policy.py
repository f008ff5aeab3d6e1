from tilenames.mercator import MAX_LATITUDE, num_tiles


# names of the edge policies which can be given in the config file.
EXTRAPOLATE = 'extrapolate'
CLAMP = 'clamp'
WRAP = 'wrap'


def wrap_longitude(lon):
    """
    Wraps a longitude in degrees into [-180, 180).
    """

    return (lon + 180.0) % 360.0 - 180.0


def clamp_latitude(lat):
    """
    Clamps a latitude in degrees to the range covered by the square mercator
    world, so that it always projects onto the grid.
    """

    return min(max(lat, -MAX_LATITUDE), MAX_LATITUDE)


def clamp_tile(x, y, zoom):
    extent = num_tiles(zoom)
    return (min(max(0, x), extent - 1),
            min(max(0, y), extent - 1))


def wrap_tile(x, y, zoom):
    """
    The grid repeats east-west, so x is taken modulo the grid size. It does
    not repeat north-south, so y is clamped.
    """

    extent = num_tiles(zoom)
    return (x % extent, min(max(0, y), extent - 1))


def _extrapolate(x, y, zoom):
    num_tiles(zoom)
    return (x, y)


POLICIES = {
    EXTRAPOLATE: _extrapolate,
    CLAMP: clamp_tile,
    WRAP: wrap_tile,
}


def check_policy(name):
    if name not in POLICIES:
        raise ValueError("Unknown edge policy %r, expected one of %s."
                         % (name, ", ".join(sorted(POLICIES.keys()))))
    return name


def apply_policy(name, x, y, zoom):
    """
    Brings tile x, y at `zoom` back onto the grid according to the named
    policy.
    """

    return POLICIES[check_policy(name)](x, y, zoom)
