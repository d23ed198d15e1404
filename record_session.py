import logging
import os
import numpy as np
from Config.ConfigLoader import load_cfg
from Logger.Factory import FrameLoggerFactory

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = load_cfg("Config/frame_logger.yaml")
    os.makedirs(os.path.dirname(cfg["Logger"]["path"]) or ".", exist_ok=True)

    rng = np.random.default_rng(0)
    frames_per_trial = cfg["Logger"]["num_frames"] // max(1, cfg["Logger"]["num_trials"])

    # each trial starts on a fresh frame
    with FrameLoggerFactory.from_config(cfg) as logger:
        logger.add_line("# seed=", 0, " frames_per_trial=", frames_per_trial)
        for trial in range(cfg["Logger"]["num_trials"]):
            logger.start_new_trial()
            pos = rng.normal(size=2)
            for _ in range(frames_per_trial):
                step = rng.normal(scale=0.01, size=2)
                pos = pos + step
                blink = int(rng.random() < 0.02)
                logger.add_frame(pos[0], pos[1], blink, np.linalg.norm(step))
        logger.write()
        logger.add_line("# trials: ", " ".join(f"{s}-{e}" for s, e in logger.trials()))

    print(f"Saved: {cfg['Logger']['path']}")
