"""
Configuration for the di-lepton selection.

The cut values live in a nested dict mirroring ``config/config.yaml``.
A YAML file only needs to list the cuts it changes; everything else
falls back to ``DEFAULT_CONFIG``.
"""

import copy
import logging

import yaml


logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "selection": {
        "electron": {
            "pt_min": 20.0,
            "eta_max": 2.4,
            "iso03_max": 0.17,
            "miss_hits_max": 0,
        },
        "muon": {
            "pt_min": 20.0,
            "eta_max": 2.4,
            "iso03_max": 0.20,
            "hits_valid_min": 12,
            "hits_pixel_min": 2,
            # impact parameters in the native unit of the ntuple branches
            "dist_pv0_max": 0.02,
            "dist_pvz_max": 0.5,
            "chi2ndof_max": 10.0,
        },
        "pair": {
            "mass_min": 12.0,
            # vetoed in ee and mumu only
            "z_window": [76.0, 106.0],
        },
    },
}


def default_config():
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(path=None):
    """
    Load the selection configuration.

    Parameters
    ----------
    path : str or None
        YAML file with cut overrides. ``None`` returns the defaults.

    Returns
    -------
    dict
        Complete configuration with every cut present.
    """
    config = default_config()
    if path is None:
        return config

    with open(path) as f:
        overrides = yaml.safe_load(f) or {}

    logger.info("Loaded selection config from %s", path)
    _merge(config, overrides, prefix="")
    _check_z_window(config["selection"]["pair"]["z_window"])
    return config


def _merge(base, overrides, prefix):
    if not isinstance(overrides, dict):
        raise ValueError(f"Config section '{prefix or '<root>'}' must be a mapping")

    for key, value in overrides.items():
        name = f"{prefix}.{key}" if prefix else key
        if key not in base:
            raise ValueError(f"Unknown config key '{name}'")

        if isinstance(base[key], dict):
            _merge(base[key], value, name)
        else:
            logger.info("Overriding %s: %r -> %r", name, base[key], value)
            base[key] = value


def _check_z_window(window):
    if not isinstance(window, (list, tuple)) or len(window) != 2:
        raise ValueError(f"selection.pair.z_window must be [low, high], got {window!r}")
    low, high = window
    if low > high:
        raise ValueError(f"selection.pair.z_window is inverted: {window!r}")
