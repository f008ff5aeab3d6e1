from yaml import safe_load
from tilenames.util import BoundingBox
from tilenames.region import Region
import tilenames.policy as policy
import copy
import logging
import logging.config
import os.path


class Configuration(object):

    def __init__(self, yml):
        self.yml = yml
        self.regions = []
        for name, settings in self._cfg('regions').items():
            self.regions.append(self._parse_region(settings))

        self.grid = self._cfg('grid')
        policy.check_policy(self.grid['policy'])
        self.logconfig = self._cfg('logging config')

    def copy_with_regions(self, regions):
        """
        Copy this config, replacing the regions with those in the `regions`
        parameter.
        """

        new = copy.deepcopy(self)
        new.regions = []
        for region in regions:
            new.regions.append(self._parse_region(region))

        return new

    def _cfg(self, yamlkeys_str):
        yamlkeys = yamlkeys_str.split()
        yamlval = self.yml
        for subkey in yamlkeys:
            yamlval = yamlval[subkey]
        return yamlval

    def _parse_region(self, settings):
        zoom_range = tuple(settings['zoom_range'])
        if len(zoom_range) != 2 or zoom_range[0] < 0 or \
           zoom_range[0] > zoom_range[1]:
            raise ValueError("Bad zoom range %r in region, expected "
                             "[min, max) with 0 <= min <= max."
                             % (settings['zoom_range'],))
        return Region(BoundingBox.from_dict(settings['bbox']), zoom_range)


def default_yml_config():
    return {
        'regions': {},
        'grid': {
            'policy': policy.EXTRAPOLATE,
            'tile_size': 256,
        },
        'logging': {
            'config': None
        },
    }


def merge_cfg(dest, source):
    for k, v in source.items():
        if isinstance(v, dict):
            subdest = dest.setdefault(k, {})
            merge_cfg(subdest, v)
        else:
            dest[k] = v
    return dest


def make_config(path, opencfg=open):
    # opencfg for testing
    cfg = default_yml_config()
    with opencfg(path) as config_fp:
        yml_data = safe_load(config_fp.read())
        if yml_data:
            cfg = merge_cfg(cfg, yml_data)
    return Configuration(cfg)


def configure_logging(cfg, path):
    """
    Sets up logging from the file named in the config's `logging config`,
    which is relative to the directory of the config file at `path`. Does
    nothing if there isn't one.
    """

    if cfg.logconfig is None:
        return

    config_dir = os.path.dirname(path)
    logconfig_path = os.path.join(config_dir, cfg.logconfig)
    # loggers are module-level and may already exist, keep them enabled.
    logging.config.fileConfig(logconfig_path,
                              disable_existing_loggers=False)
    logging.getLogger('config').debug("Configured logging from %r."
                                      % logconfig_path)
