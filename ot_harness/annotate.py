import cv2

INNER_COLOR = (255, 255, 255)
OUTER_COLOR = (0, 0, 0)
LOST_COLOR = (0, 0, 255)
LABEL_COLOR = (0, 255, 255)

LOST_TEXT = "Tracking lost"


def _corners(x, y, w, h):
    # cv2.rectangle includes pt2, so the last column is x + w - 1
    return (int(round(x)), int(round(y))), (int(round(x + w)) - 1, int(round(y + h)) - 1)


def annotate(frame, roi, inner_color=INNER_COLOR, outer_color=OUTER_COLOR):
    """Draw a double border around the ROI, in place.

    The inner outline sits on the ROI bounds; the outer one is one pixel
    larger on every side so the marker shows on light and dark backgrounds.
    """
    pt1, pt2 = _corners(roi.x - 1, roi.y - 1, roi.width + 2, roi.height + 2)
    cv2.rectangle(frame, pt1, pt2, outer_color, 1, cv2.LINE_8)
    pt1, pt2 = _corners(roi.x, roi.y, roi.width, roi.height)
    cv2.rectangle(frame, pt1, pt2, inner_color, 1, cv2.LINE_8)
    return frame


def draw_lost_indicator(frame, color=LOST_COLOR, text=LOST_TEXT):
    """Banner shown instead of the ROI marker once tracking is lost."""
    cv2.putText(frame, text, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.8, OUTER_COLOR, 4)
    cv2.putText(frame, text, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.8, color, 2)
    return frame


def draw_frame_label(frame, result, fields, color=LABEL_COLOR):
    """Overlay the frame number and the logged row at the bottom-left corner."""
    height = frame.shape[0]
    values = ",".join(fields) if not result.is_lost else "lost"
    cv2.putText(frame, f"#{result.frame_index} {values}", (10, height - 10),
                cv2.FONT_HERSHEY_SIMPLEX, 0.5, color, 1)
    return frame


def display_frame(frame, window_name, wait_ms=10):
    """Show a frame and return the key pressed while waiting (-1 for none)."""
    cv2.imshow(window_name, frame)
    return cv2.waitKey(wait_ms)
