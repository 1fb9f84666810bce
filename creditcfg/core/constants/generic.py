"""Generic constants shared by the tables, renderer and deploy tooling."""

# Basis points (100% = 10000)
PERCENTAGE_FACTOR = 10_000

# Address placeholder for a token or contract missing on a network
NOT_DEPLOYED = ""

# Contract placeholder used by adapters without a base pool
NO_CONTRACT = "NO_CONTRACT"
