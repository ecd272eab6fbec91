"""Global configuration for primefield."""

# ---------- Well-known primes ----------
# Moduli that downstream curve / proof code most often builds fields over.
SECP256K1_P = 2**256 - 2**32 - 977  # secp256k1 base field
BN254_P = 21888242871839275222246405745257275088696311157297823662689037894645226208583  # alt_bn128 Fq
BN254_R = 21888242871839275222246405745257275088548364400416034343698204186575808495617  # alt_bn128 Fr
M127 = 2**127 - 1  # Mersenne prime M127
M61 = 2**61 - 1    # Mersenne prime M61

# ---------- Primality testing ----------
# Trial-division table, checked before Miller-Rabin.
SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97)

# The first 13 primes as witnesses make Miller-Rabin deterministic for
# n < 3_317_044_064_679_887_385_961_981.  Twelve are not enough:
# 318_665_857_834_031_151_167_461 passes every base up to 37.
MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
MILLER_RABIN_DETERMINISTIC_LIMIT = 3_317_044_064_679_887_385_961_981

# Random witnesses added on top of the fixed bases above the limit.
MILLER_RABIN_EXTRA_ROUNDS = 16
