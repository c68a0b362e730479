"""
Physics utilities for the di-lepton selection.

This module provides the lepton mass constants and the four-vector
builder used by the pair selection, on top of the `vector` package.
"""

import awkward as ak
import vector


# Lepton masses [GeV]
ELECTRON_MASS = 0.000511
MUON_MASS = 0.105658


def build_four_vector(pt, eta, phi, mass):
    """
    Construct an on-shell four-vector from (pt, eta, phi, m).

    The sign of ``pt`` carries the lepton charge in the ntuples, so only
    its magnitude enters the kinematics.

    Parameters
    ----------
    pt : float or Awkward Array
        Signed transverse momentum [GeV].
    eta : float or Awkward Array
        Pseudorapidity.
    phi : float or Awkward Array
        Azimuthal angle [radians].
    mass : float
        Rest mass of the particle species [GeV].

    Returns
    -------
    vector.MomentumObject4D or vector Awkward Array
        A single Lorentz vector for scalar inputs, otherwise an array of
        Lorentz vectors with the same jagged structure as ``pt``.
    """
    if isinstance(pt, ak.Array):
        return vector.zip(
            {
                "pt": abs(pt),
                "eta": eta,
                "phi": phi,
                "mass": ak.full_like(pt, mass, dtype=float),
            }
        )

    return vector.obj(pt=abs(float(pt)), eta=float(eta), phi=float(phi), mass=mass)
