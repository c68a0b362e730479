"""
Channel selectors for the ttbar di-lepton analysis: ee, mumu and emu.

Each selector takes one event and returns the best ``SelectionResult``
of its channel, or ``None``. The selectors are independent of each
other and keep no state between events.
"""

from collections import namedtuple
from functools import partial

from ttdilep.analysis.config import DEFAULT_CONFIG
from ttdilep.analysis.event import EventRecord
from ttdilep.analysis.pairs import build_candidates, select_best_pair
from ttdilep.analysis.physics import ELECTRON_MASS, MUON_MASS
from ttdilep.analysis.selection import select_electron, select_muon


Channel = namedtuple("Channel", ["name", "first", "second", "veto_z_window"])

CHANNELS = {
    "ee": Channel("ee", "electron", None, True),
    "mumu": Channel("mumu", "muon", None, True),
    "emu": Channel("emu", "electron", "muon", False),
}


def _electron_candidates(event, config):
    leptons = (event.electron(i) for i in range(event.electron_count))
    predicate = partial(select_electron, **config["selection"]["electron"])
    return build_candidates(leptons, predicate, ELECTRON_MASS)


def _muon_candidates(event, config):
    leptons = (event.muon(i) for i in range(event.muon_count))
    predicate = partial(select_muon, **config["selection"]["muon"])
    return build_candidates(leptons, predicate, MUON_MASS)


_CANDIDATE_BUILDERS = {
    "electron": _electron_candidates,
    "muon": _muon_candidates,
}


def select_channel(event, channel, config=None, min_sum_pt=None):
    """
    Run the best-pair search of one channel on one event.

    Parameters
    ----------
    event : EventRecord or mapping
        The event; a branch mapping is wrapped in an ``EventRecord``.
    channel : str or Channel
        "ee", "mumu", "emu", or a custom ``Channel``.
    config : dict or None
        Selection config, see ``ttdilep.analysis.config``.
    min_sum_pt : float or None
        Only accept pairs with a pT sum of at least this value.

    Returns
    -------
    SelectionResult or None
    """
    if isinstance(channel, str):
        channel = CHANNELS[channel]
    config = config or DEFAULT_CONFIG
    event = EventRecord.wrap(event)

    first = _CANDIDATE_BUILDERS[channel.first](event, config)
    second = None
    if channel.second is not None:
        second = _CANDIDATE_BUILDERS[channel.second](event, config)

    pair_cuts = config["selection"]["pair"]
    return select_best_pair(
        first,
        second,
        veto_z_window=channel.veto_z_window,
        mass_min=pair_cuts["mass_min"],
        z_window=pair_cuts["z_window"],
        min_sum_pt=min_sum_pt,
        label=channel.name,
    )


def select_ee(event, config=None, min_sum_pt=None):
    """Best opposite-sign electron pair outside the Z window."""
    return select_channel(event, "ee", config, min_sum_pt)


def select_mumu(event, config=None, min_sum_pt=None):
    """Best opposite-sign muon pair outside the Z window."""
    return select_channel(event, "mumu", config, min_sum_pt)


def select_emu(event, config=None, min_sum_pt=None):
    """Best opposite-sign electron-muon pair."""
    return select_channel(event, "emu", config, min_sum_pt)


CHANNEL_SELECTORS = {
    "ee": select_ee,
    "mumu": select_mumu,
    "emu": select_emu,
}
