import math

# --- Vector Math Helpers ---
def subtract_vectors(v1, v2):
    return (v1[0] - v2[0], v1[1] - v2[1])

def magnitude_sq(v):
    return v[0]**2 + v[1]**2

def rotate_vector(v, angle_rad):
    """ Rotate a 2D vector by angle_rad around the origin. """
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    return (v[0] * cos_a - v[1] * sin_a, v[0] * sin_a + v[1] * cos_a)

# --- Collision Functions ---
def check_circle_circle_collision(c1_pos_x, c1_pos_y, c1_radius, c2_pos_x, c2_pos_y, c2_radius) -> bool:
    distance_sq = magnitude_sq(subtract_vectors((c1_pos_x, c1_pos_y), (c2_pos_x, c2_pos_y)))
    radii_sum = c1_radius + c2_radius
    # Touching circles do not collide
    return distance_sq < radii_sum**2

def check_ellipse_circle_collision(ellipse_x, ellipse_y, ellipse_angle_rad, width, height,
                                   circle_x, circle_y, circle_radius) -> bool:
    """
    Approximate test between a rotated ellipse (the ship) and a circle (an asteroid).

    The circle's centre is moved into the ellipse's unrotated local frame and plugged into
    the normalised ellipse equation. Instead of an exact Minkowski sum, the circle's radius
    inflates the ellipse boundary by radius / max(a, b).

    Args:
        ellipse_x, ellipse_y (float): Ellipse centre in world space.
        ellipse_angle_rad (float): Ellipse rotation in radians.
        width, height (float): Full ellipse extents along its local x and y axes.
        circle_x, circle_y (float): Circle centre in world space.
        circle_radius (float): Circle radius.

    Returns:
        bool: True if the shapes are considered overlapping.
    """
    a = width / 2
    b = height / 2

    offset = subtract_vectors((circle_x, circle_y), (ellipse_x, ellipse_y))
    local_x, local_y = rotate_vector(offset, -ellipse_angle_rad)

    ellipse_value = (local_x * local_x) / (a * a) + (local_y * local_y) / (b * b)
    circle_contribution = circle_radius / max(a, b)

    return ellipse_value <= (1 + circle_contribution)**2
