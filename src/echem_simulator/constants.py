"""Physical constants and fixed model inputs shared by the models and analysis."""

FARADAY = 96485.0          # C/mol
GAS_CONSTANT = 8.314       # J/(mol·K)
ELECTRONS = 2              # n
CONCENTRATION = 1e-3       # M, bulk redox species
AMPS_TO_MICROAMPS = 1e6
