"""Wall/door splitting constants.

Distances are in output canvas units; parameters are fractions of wall length.
"""

DOOR_MATCH_TOLERANCE = 6.0    # max perpendicular distance of a door endpoint from a wall
MERGE_EPSILON = 0.001         # door ranges closer than this merge; shorter wall pieces drop
PROJECTION_MIN = -0.01        # door endpoints may overhang the wall start by 1%
PROJECTION_MAX = 1.01         # ... or its end
MIN_WALL_LENGTH = 0.1         # shorter walls never match doors
COLLINEAR_TOLERANCE = 0.5     # wall pieces this close to one line are the same wall
