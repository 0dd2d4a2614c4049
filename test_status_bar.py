import time

from status_bar import render_status


def test_position_summary_while_history_continues():
    text = render_status({"selected": 2, "loaded": 40, "exhausted": False}, 20)
    assert text == " 3/40+ commits".ljust(20)


def test_position_summary_after_exhaustion():
    text = render_status({"selected": 0, "loaded": 3, "exhausted": True}, 30)
    assert text.rstrip() == " 1/3 commits"


def test_transient_message_wins_until_it_expires():
    ctx = {
        "status_msg": "No description available",
        "status_until": time.time() + 60,
        "selected": 0,
        "loaded": 3,
    }
    assert render_status(ctx, 12) == " No descript"

    ctx["status_until"] = time.time() - 1
    assert render_status(ctx, 40).startswith(" 1/3+ commits")
