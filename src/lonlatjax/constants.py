"""
The `constants` module defines the geodetic and encryption constants used by
the coordinate system conversions.

The values are fixed by the reference encryption formulas. Converters
reproduce reference outputs to the last bit, so the literals are kept exactly
as published.
"""

# Mathematical Constants
"""
Value of pi used by the GCJ-02 correction formulas.
"""
PI = 3.1415926535897932384626

"""
Scaled pi used by the BD-09 polar transform. Equal to pi * 3000 / 180.
"""
X_PI = 3.14159265358979324 * 3000.0 / 180.0

# Ellipsoid Constants
"""
Semi-major axis of the Krasovsky 1940 ellipsoid used by GCJ-02. Units: *m*
"""
A = 6378245.0

"""
First eccentricity squared of the Krasovsky 1940 ellipsoid. Units: *dimensionless*
"""
EE = 0.00669342162296594323

# Covered Region
"""
Bounding box of the region in which the GCJ-02 encryption is applied.
Units: *deg*
"""
REGION_LON_MIN = 72.004
REGION_LON_MAX = 137.8347
REGION_LAT_MIN = 0.8293
REGION_LAT_MAX = 55.8271

"""
Reference point the correction polynomials are expanded around. Units: *deg*
"""
ORIGIN_LON = 105.0
ORIGIN_LAT = 35.0

# BD-09 Constants
"""
Fixed offsets added by the GCJ-02 to BD-09 transform. Units: *deg*
"""
BD09_LON_OFFSET = 0.0065
BD09_LAT_OFFSET = 0.006

# Tuba Constants
"""
Fixed-point scale applied to degrees before the tuba perturbation.
"""
TUBA_SCALE = 100000.0

"""
Modulus the scaled tuba coordinates are reduced by (360 degrees at TUBA_SCALE).
"""
TUBA_MODULUS = 36000000.0
