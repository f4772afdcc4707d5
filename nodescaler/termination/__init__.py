"""Node termination; this sub-package holds no modules at present."""