from tilenames.mercator import DomainError, MAX_LATITUDE, num_tiles, \
    lonlat_to_tile, lonlat_to_fractional_tile, lonlat_to_pixel, \
    tile_to_lonlat, tile_center, latlon_bbox, mercator_bbox, zoom_in, \
    zoom_out, tile_name, parse_tile_name
