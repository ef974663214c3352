"""Algorithm cutoffs, in limbs, for the multi-limb integer routines."""

import sys

# Stands in for "never switch": no FFT-based layer exists above these.
_UNBOUNDED = sys.maxsize

MUL_CLASSICAL_CUTOFF = 33

MUL_KARA_CUTOFF = 400

MUL_TOOM32_CUTOFF = _UNBOUNDED

MUL_TOOM33_CUTOFF = _UNBOUNDED

MULMID_CLASSICAL_CUTOFF = 80

MULLOW_CLASSICAL_CUTOFF = 120

DIVAPPROX_CLASSICAL_CUTOFF = 45

DIVREM_CLASSICAL_CUTOFF = 80