from __future__ import annotations


from .actions import Action, FlipAction, ResolveAction
from .session import Session
from .types import Card


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, FlipAction):
        return {"type": "flip", "card_id": a.card_id}
    if isinstance(a, ResolveAction):
        return {"type": "resolve"}
    # should be unreachable
    return {"type": "unknown"}


def _card_to_dict(c: Card) -> dict[str, object]:
    return {
        "id": c.id,
        "image_ref": c.image_ref,
        "face_up": c.face_up,
        "matched": c.matched,
        "owner": c.owner,
    }


def snapshot(session: Session) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current session."""
    return {
        "seed": session.seed,
        "board": session.board.cards,
        "image_set": session.image_set_index,
        "phase": session.phase,
        "active_player": session.active_player,
        "scores": list(session.scores),
        "open_selection": list(session.open_selection),
        "input_locked": session.input_locked,
        "cards": [_card_to_dict(c) for c in session.cards],
        "action_log": [action_to_dict(a) for a in session.action_log],
    }
