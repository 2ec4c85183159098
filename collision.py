def clamp(value, low, high):
    return max(low, min(high, value))


def circle_rect_collision(cx, cy, radius, rect_x, rect_y, rect_w, rect_h):
    # Nearest point on the rectangle to the circle center; equals the center
    # itself when the center lies inside the rectangle.
    closest_x = clamp(cx, rect_x, rect_x + rect_w)
    closest_y = clamp(cy, rect_y, rect_y + rect_h)
    dx = cx - closest_x
    dy = cy - closest_y
    return dx * dx + dy * dy <= radius * radius


def ball_hits_paddle(ball, paddle):
    return circle_rect_collision(
        ball.pos.x,
        ball.pos.y,
        ball.radius,
        paddle.x,
        paddle.y,
        paddle.width,
        paddle.height,
    )
