#!/usr/bin/env python3
"""
kfanim Quick Start - Installation Verification
==============================================

Run: python quickstart.py

This script verifies your kfanim installation by:
1. Checking all required Python packages are installed
2. Checking the kfanim modules import
3. Loading the sample clip configuration and playing one loop
4. Printing next steps

If all checks pass, your kfanim installation is ready to use!
"""

import sys
from pathlib import Path

# Project root setup
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))


def print_header(title):
    """Print a formatted section header."""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_check(name, passed, details=None):
    """Print a check result."""
    status = "[OK]" if passed else "[FAIL]"
    print(f"  {status} {name}")
    if details:
        print(f"       {details}")


def check_imports():
    """Check all required Python packages are installed."""
    print_header("Checking Python Dependencies")

    packages = [
        ("numpy", "numpy"),
        ("numpy-quaternion", "quaternion"),
        ("PyYAML", "yaml"),
        ("matplotlib", "matplotlib"),
    ]

    all_ok = True
    for name, import_name in packages:
        try:
            module = __import__(import_name)
            version = getattr(module, "__version__", "unknown")
            print_check(name, True, f"version {version}")
        except ImportError as e:
            print_check(name, False, str(e))
            all_ok = False

    return all_ok


def check_kfanim_modules():
    """Check kfanim modules can be imported."""
    print_header("Checking kfanim Modules")

    modules = [
        ("Config Manager", "kfanim.config.anim_config_manager", "AnimationConfigManager"),
        ("Keyframe Track", "kfanim.animation.sampler", "KeyframeTrack"),
        ("Clip", "kfanim.animation.clip", "Clip"),
        ("Clip Loader", "kfanim.io.clip_loader", "load_clips"),
        ("Data Writer", "kfanim.io.data_writer", "save_baked_clip"),
        ("Clip Plotter", "kfanim.visualization.clip_plotter", "create_clip_plot"),
    ]

    all_ok = True
    for name, module_path, attr_name in modules:
        try:
            module = __import__(module_path, fromlist=[attr_name])
            getattr(module, attr_name)
            print_check(name, True)
        except Exception as e:
            print_check(name, False, str(e))
            all_ok = False

    return all_ok


def load_sample_config():
    """Load the sample bouncing cube configuration and play one loop."""
    print_header("Loading Sample Configuration")

    try:
        from kfanim.config.anim_config_manager import AnimationConfigManager
        from kfanim.io.clip_loader import load_clips

        config_manager = AnimationConfigManager(PROJECT_ROOT)
        config = config_manager.load_config("bouncing_cube/bouncing_cube_config.yaml")
        nodes, handles, clips = load_clips(config)

        print_check("Configuration loaded", True)
        print(f"       Animation: {config.name}")
        print(f"       Nodes: {len(nodes)}")
        print(f"       Clips: {', '.join(clips)}")

        clip = clips["bounce"]
        frames = 0
        while True:
            clip.advance(1.0 / 60.0)
            frames += 1
            if clip.current_time == 0.0:
                break
        print_check("Clip played", True, f"looped after {frames} frames")

        return True
    except Exception as e:
        print_check("Configuration loading", False, str(e))
        return False


def print_summary(results):
    """Print final summary and next steps."""
    print_header("Summary")

    all_passed = all(results.values())

    if all_passed:
        print("  All checks passed! Your kfanim installation is ready.")
    else:
        print("  Some checks failed. Please review the errors above.")
        print()
        print("  Try reinstalling:")
        print("    pip install -e .[test]")
        return

    print()
    print("-" * 60)
    print("  Next Steps:")
    print("-" * 60)
    print()
    print("  1. Play the sample clip and inspect node transforms:")
    print("     python examples/01_play_clip.py")
    print()
    print("  2. Bake the sample clip to CSV and plot its curves:")
    print("     python examples/02_bake_and_plot.py")
    print()


def main():
    """Run all verification checks."""
    print()
    print("=" * 60)
    print("  kfanim Quick Start - Installation Verification")
    print("=" * 60)

    results = {}

    results["imports"] = check_imports()
    results["kfanim_modules"] = check_kfanim_modules()
    results["sample_config"] = load_sample_config()

    print_summary(results)

    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
