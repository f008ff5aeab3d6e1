from tilenames.mercator import DomainError, num_tiles
import numpy


# vectorised versions of the conversions in tilenames.mercator, for when
# there are a lot of points, e.g: every vertex of a GPS track. the formulas
# are the same, and so are the edge cases.


def lonlat_to_fractional_tiles(lons, lats, zoom):
    extent = float(num_tiles(zoom))
    lons = numpy.asarray(lons, dtype=numpy.float64)
    lats = numpy.asarray(lats, dtype=numpy.float64)

    if not numpy.all(numpy.isfinite(lons)):
        raise DomainError("Longitudes must all be finite.")
    # negated so that NaN fails the check too.
    bad = ~((lats > -90.0) & (lats < 90.0))
    if numpy.any(bad):
        raise DomainError("Latitudes must lie strictly between -90 and 90, "
                          "got %r." % (lats[bad].tolist(),))

    lat_rad = numpy.radians(lats)
    xs = (lons + 180.0) / 360.0 * extent
    ys = (1.0 - numpy.log(numpy.tan(lat_rad) + 1.0 / numpy.cos(lat_rad)) /
          numpy.pi) / 2.0 * extent
    return (xs, ys)


def lonlat_to_tiles(lons, lats, zoom):
    """
    Returns a pair of integer arrays, the x and y tile indices of each point.
    Nothing is clamped; see `tilenames.policy` for that.
    """

    xs, ys = lonlat_to_fractional_tiles(lons, lats, zoom)
    return (numpy.floor(xs).astype(numpy.int64),
            numpy.floor(ys).astype(numpy.int64))


def tiles_to_lonlat(xs, ys, zoom):
    """
    Returns a pair of arrays, the longitudes and latitudes of the north-west
    corner of each tile.
    """

    extent = float(num_tiles(zoom))
    xs = numpy.asarray(xs, dtype=numpy.float64)
    ys = numpy.asarray(ys, dtype=numpy.float64)

    lons = xs / extent * 360.0 - 180.0
    # sinh overflowing to +/-inf is fine, atan takes it to +/-pi/2.
    with numpy.errstate(over='ignore'):
        lats = numpy.degrees(numpy.arctan(
            numpy.sinh(numpy.pi * (1.0 - 2.0 * ys / extent))))
    return (lons, lats)
