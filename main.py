"""Entry point that replays a scripted free camera flight."""

import logging
import math

from freecam import CameraController, ControllerConfig, InputFrame

logger = logging.getLogger("freecam.demo")

# (frames, per-second input)
FLIGHT = [
    (60, InputFrame(forward=1.0)),
    (30, InputFrame(yaw=math.pi / 2 / 0.01 / 0.5)),
    (60, InputFrame(forward=1.0, right=0.5)),
    (30, InputFrame(up=1.0, pitch=-5.0)),
    (20, InputFrame()),
]


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    config = ControllerConfig()
    controller = CameraController(config)
    for frames, rate in FLIGHT:
        frame = rate.scaled(config.step_dt)
        for _ in range(frames):
            result = controller.step(frame)
        logger.info(
            "after %d steps: position=(%.3f, %.3f, %.3f) yaw=%.3f pitch=%.3f",
            controller.step_index,
            *result.position,
            result.angles[0],
            result.angles[1],
        )
    controller.recenter()


if __name__ == "__main__":
    main()
