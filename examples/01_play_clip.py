#!/usr/bin/env python3
"""
kfanim Example 1: Playing a Clip
================================

Loads the bouncing cube configuration, plays the 'bounce' clip at 30 fps
for a little over one loop and prints the cube's transform every few frames.

Run from project root:
    python examples/01_play_clip.py

Expected output:
    - Console table of time, translation, rotation and scale
    - The clock wrapping back to 0.000 after t = 1.0
"""

import sys
import logging
from pathlib import Path

# =============================================================================
# SETUP PROJECT ROOT
# =============================================================================
# This ensures imports work whether run from project root or examples/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np

# kfanim imports
from kfanim.config.anim_config_manager import AnimationConfigManager
from kfanim.io.clip_loader import load_clips
from kfanim.interpolation import quaternion_to_xyzw


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    print("=" * 60)
    print("kfanim Example 1: Playing a Clip")
    print("=" * 60)

    # =========================================================================
    # STEP 1: Load Configuration
    # =========================================================================
    print("\n[1/2] Loading configuration...")

    config_manager = AnimationConfigManager(PROJECT_ROOT)
    config = config_manager.load_config("bouncing_cube/bouncing_cube_config.yaml")
    nodes, handles, clips = load_clips(config)

    clip = clips["bounce"]
    cube = nodes.resolve(handles["cube"])
    print(f"  Clip: {clip.name}")
    print(f"  Bounds: {clip.bounds()}")

    # =========================================================================
    # STEP 2: Play
    # =========================================================================
    print("\n[2/2] Playing at 30 fps...")

    np.set_printoptions(precision=3, suppress=True)
    frame_time = 1.0 / 30.0

    print(f"\n  {'time':>6}  {'translation':<22} {'rotation [x y z w]':<28} scale")
    for frame in range(36):
        written = clip.advance(frame_time)
        if frame % 3 == 0 or clip.current_time == 0.0:
            transform = cube.get_transform()
            print(f"  {clip.current_time:6.3f}  {str(transform.translation):<22} "
                  f"{str(quaternion_to_xyzw(transform.rotation)):<28} {transform.scale}  ({written} channels)")

    print("\nExample complete!")


if __name__ == "__main__":
    main()
