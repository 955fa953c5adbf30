"""Gymnasium environment wrapper for Butterfly Effect.

Provides a structured observation that pairs a rendered RGBA image with an
info dictionary (token state, game status, config). Reward is the delta of
``state.score`` per step, i.e. one per goal reached. ``terminated`` is
``True`` once every level is cleared, ``truncated`` once a level became
unsolvable.

Each environment step is one movement tick with the chosen key held;
``GymAction.WAIT`` holds nothing so the token keeps its direction.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"token": {...}, "status": {...}, "config": {...}}}``

Usage:

``env = ButterflyEffectEnv(max_turns=10)``

Keyword arguments other than the rendering knobs override fields of
:class:`~butterfly_effect.config.GameConfig`.
"""

from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from butterfly_effect.actions import Action, GymAction
from butterfly_effect.config import DEFAULT_CONFIG, GameConfig
from butterfly_effect.renderer.image import DEFAULT_RESOLUTION, ImageRenderer
from butterfly_effect.state import State
from butterfly_effect.step import step
from butterfly_effect.systems.level import new_game

ObsType = Dict[str, Any]

GYM_TO_ACTION: Dict[GymAction, Action] = {
    GymAction.LEFT: Action.LEFT,
    GymAction.UP: Action.UP,
    GymAction.RIGHT: Action.RIGHT,
    GymAction.DOWN: Action.DOWN,
    GymAction.RESET: Action.RESET,
    GymAction.WAIT: Action.WAIT,
}


def token_observation_dict(state: State) -> Dict[str, Any]:
    """Token sub-observation: position, facing and remaining budget."""
    token = state.token
    return {
        "x": int(token.position.x),
        "y": int(token.position.y),
        "direction": token.direction.name,
        "turns_left": int(token.turns_left),
    }


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (level, goals, score, phase, turn)."""
    return {
        "level": int(state.level.index),
        "goals_reached": int(state.attempt.goals_reached),
        "trail_walls": int(len(state.grid.trail_walls) + len(state.grid.settled_walls)),
        "score": int(state.score),
        "phase": state.phase.value,
        "turn": int(state.turn),
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (dimensions and budget constants)."""
    config = state.config
    return {
        "width": config.width,
        "height": config.height,
        "max_turns": config.max_turns,
        "goal_threshold": config.goal_threshold,
        "levels": len(config.levels),
    }


class ButterflyEffectEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation of the game.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`butterfly_effect.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        config: GameConfig = DEFAULT_CONFIG,
        **kwargs: Any,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open window.
            render_resolution: Width (pixels) of rendered image; height is scaled.
            config: Base game configuration.
            **kwargs: ``GameConfig`` field overrides (e.g. ``max_turns=5``).
        """
        from gymnasium import spaces

        self.config: GameConfig = replace(config, **kwargs) if kwargs else config
        self.state: Optional[State] = None

        self._render_mode = render_mode
        self._renderer = ImageRenderer(resolution=render_resolution)

        cell_size = max(1, render_resolution // self.config.width)
        render_width = self.config.width * cell_size
        render_height = self.config.height * cell_size

        text_space_short = spaces.Text(max_length=32)

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_height, render_width, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "token": spaces.Dict(
                            {
                                "x": int_box(0, self.config.width - 1),
                                "y": int_box(0, self.config.height - 1),
                                "direction": text_space_short,
                                "turns_left": int_box(0, self.config.max_turns),
                            }
                        ),
                        "status": spaces.Dict(
                            {
                                "level": int_box(0, 1_000_000),
                                "goals_reached": int_box(0, 1_000_000),
                                "trail_walls": int_box(0, 1_000_000),
                                "score": int_box(0, 1_000_000_000),
                                "phase": text_space_short,  # "playing" / "won" / "lost"
                                "turn": int_box(0, 1_000_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "width": int_box(1, 10_000),
                                "height": int_box(1, 10_000),
                                "max_turns": int_box(0, 1_000_000),
                                "goal_threshold": int_box(0, 1_000_000),
                                "levels": int_box(0, 1_000_000),
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new game.

        Arguments:
            seed: Unused; the game is deterministic.
            options: Optional ``{"level": int}`` to start on a later level.

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        level_index = 0
        if options is not None and "level" in options:
            level_index = int(options["level"])  # type: ignore[call-overload]
        self.state = new_game(self.config, level_index=level_index)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one movement tick with ``action`` held.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        step_action = GYM_TO_ACTION[GymAction(int(action))]

        prev_score = self.state.score
        self.state = step(self.state, step_action)
        reward = float(self.state.score - prev_score)
        obs = self._get_obs()
        terminated = self.state.win
        truncated = self.state.lose
        return obs, reward, terminated, truncated, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "token": token_observation_dict(self.state),
            "status": env_status_observation_dict(self.state),
            "config": env_config_observation_dict(self.state),
        }

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        img = self._renderer.render(self.state)
        return {"image": np.array(img), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}

    def close(self) -> None:
        """Release any renderer resources (no-op placeholder)."""
        pass
