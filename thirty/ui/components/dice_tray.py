"""Dice tray component — renders six dice with select toggles."""

from __future__ import annotations

import streamlit as st

_FACES = {1: "⚀", 2: "⚁", 3: "⚂", 4: "⚃", 5: "⚄", 6: "⚅"}


def render_dice_tray(
    dice: tuple[int, ...],
    selected_indices: frozenset[int],
    locked_indices: frozenset[int],
    key_suffix: str,
    disabled: bool = False,
) -> set[int]:
    """Render dice with one toggle button per die.

    Args:
        dice: Current dice face values.
        selected_indices: Indices the player has selected.
        locked_indices: Indices already used for scoring this round.
        key_suffix: Unique suffix for widget keys (round + roll).
        disabled: Force-disable all buttons (before the first roll).

    Returns:
        Set of toggled indices (empty if nothing changed).
    """
    toggled: set[int] = set()
    cols = st.columns(len(dice))

    for i, col in enumerate(cols):
        value = dice[i]
        with col:
            st.markdown(
                f"<div style='font-size:3.5rem;text-align:center;'>{_FACES[value]}</div>",
                unsafe_allow_html=True,
            )
            if i in locked_indices:
                st.button("Used", key=f"die_{i}_{key_suffix}", use_container_width=True, disabled=True)
            elif i in selected_indices:
                if st.button(
                    "Selected",
                    key=f"die_{i}_{key_suffix}",
                    use_container_width=True,
                    type="primary",
                    disabled=disabled,
                ):
                    toggled.add(i)
            elif st.button(
                str(value),
                key=f"die_{i}_{key_suffix}",
                use_container_width=True,
                disabled=disabled,
            ):
                toggled.add(i)

    return toggled
