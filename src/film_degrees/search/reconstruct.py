from typing import Sequence

from film_degrees.models import Path


def join_paths(forward_path: Sequence, backward_path: Sequence) -> Path:
    """
    Join two partial paths that end on the same meeting node.

    forward_path:  [origin_a, ..., meeting]
    backward_path: [origin_b, ..., meeting]
    result:        [origin_a, ..., meeting, ..., origin_b]

    The meeting node may be a person or a film.
    """
    if not forward_path or not backward_path:
        raise ValueError("Cannot join empty paths")
    if forward_path[-1].key != backward_path[-1].key:
        raise ValueError(
            f"Paths do not meet: {forward_path[-1].key} != {backward_path[-1].key}"
        )
    return list(forward_path) + list(reversed(backward_path[:-1]))


def degrees_of_separation(path: Sequence) -> int:
    """Number of film hops in an alternating person/film path."""
    return (len(path) - 1) // 2
