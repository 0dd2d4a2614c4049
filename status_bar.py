import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, selected, loaded, exhausted
    """
    text = ""
    now = time.time()
    if context.get('status_msg') and now < context.get('status_until', 0):
        text = f" {context['status_msg']}"
    else:
        loaded = context.get('loaded', 0)
        selected = context.get('selected', 0)
        more = "" if context.get('exhausted', False) else "+"
        if loaded:
            text = f" {selected + 1}/{loaded}{more} commits"
        else:
            text = " no commits"

    width = max(0, width)
    return text.ljust(width)[:width]
