import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, focus, selection_label, shape
    """
    text = ""
    now = time.time()
    if context.get('status_msg') and now < context.get('status_until', 0):
        text = f" {context['status_msg']}"
    else:
        focus = context.get('focus', 0)
        mode = 'EDIT' if focus == 1 else 'GRID'
        label = context.get('selection_label') or '-'
        num_cols, num_rows = context.get('shape', (0, 0))
        # the gutter column is not data
        shape = f"{max(0, num_cols - 1)} cols x {num_rows} rows"
        text = f" {mode} | {label} | {shape} | ,ar add row  ,ac add col  r/c select"

    return text.ljust(width)[:width]
