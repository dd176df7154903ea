"""Physical and numerical constants."""

# Gravitational acceleration (consistent units)
GRAVITY = 9.8

# Physical length of the domain
DOMAIN_LENGTH = 1000.0

# Number of ghost cells at each end of a state array
N_GHOST = 1

# Breaking dam levels
DAM_HEIGHT_LEFT = 2.0
DAM_HEIGHT_RIGHT = 1.0

# Gaussian bump: background depth and width as a fraction of ncells
BUMP_BASE_HEIGHT = 1.0
BUMP_WIDTH_FRACTION = 0.1
