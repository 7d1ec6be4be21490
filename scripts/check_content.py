#!/usr/bin/env python3
"""
check_content.py - Report content names that will not resolve at runtime.

Checks instruction, checkpoint, learn-more and quiz files against a
manifest of available sound, image and scene-object names.

Usage:
  python scripts/check_content.py --manifest assets.yaml --checkpoints JSONFiles/AutomatedTour/checkpoints.json
  python scripts/check_content.py --manifest assets.yaml --instructions JSONFiles/instructions.json --no-quiz
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tourbinder.audit import ContentAuditor, load_manifest
from tourbinder.utils import load_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Check tour content files for names that will not resolve"
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        required=True,
        help="YAML/JSON file listing available sounds, images and scene_objects"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: config/tourbinder.yaml)"
    )
    parser.add_argument("--instructions", type=Path, default=None, help="Instructions file")
    parser.add_argument("--checkpoints", type=Path, default=None, help="Checkpoints file")
    parser.add_argument("--learn-more", type=Path, default=None, help="Learn-more file")
    parser.add_argument(
        "--no-quiz",
        action="store_true",
        help="Skip the quiz question set"
    )

    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    manifest = load_manifest(args.manifest)
    logger.info(
        f"Manifest: {len(manifest.sounds)} sounds, {len(manifest.images)} images, "
        f"{len(manifest.scene_objects)} scene objects"
    )

    auditor = ContentAuditor(manifest, settings)
    report = auditor.run(
        instructions=args.instructions,
        checkpoints=args.checkpoints,
        learn_more=args.learn_more,
        quiz=not args.no_quiz,
    )

    for message in report.read_errors:
        logger.error(message)
    if report.issues:
        logger.warning(f"Found {len(report.issues)} unresolved names:")
        for issue in report.issues[:50]:
            logger.warning(f"  - [{issue.kind}] {issue.name!r} in {issue.source}, {issue.context}")
        if len(report.issues) > 50:
            logger.warning(f"  ... and {len(report.issues) - 50} more")
    else:
        logger.info("All names resolved.")

    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
