#!/usr/bin/env python3
"""
Predict Image Script

Send one image to the prediction service and print the result.

Usage:
    python scripts/predict_image.py tomato.jpg
    python scripts/predict_image.py tomato.jpg --endpoint model --model vgg16
    python scripts/predict_image.py tomato.jpg --mock
    python scripts/predict_image.py --check         # Connectivity only
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.logging_setup import setup_logging
from core.constants import ModelVariant
from prediction import UploadController, create_endpoint_resolver, create_predictor
from prediction.constants import EndpointMode


def run(args: argparse.Namespace) -> int:
    """
    Run one prediction.

    Returns:
        Process exit code (0 on success)
    """
    controller = UploadController(
        predictor=create_predictor(force_mock=args.mock),
        endpoint=create_endpoint_resolver(args.endpoint),
        model=args.model,
    )

    with controller:
        if args.check:
            if controller.test_connection():
                print(f"✅ Reachable: {controller.current_endpoint()}")
                return 0
            print(f"❌ Unreachable: {controller.current_endpoint()}")
            return 1

        controller.select_file(args.image)
        state = controller.upload()

        if state.result is not None:
            print(f"✅ Prediction: {state.result.display_label}")
            print(f"Confidence: {state.result.confidence_text}")
            return 0

        print(f"❌ {state.error}")
        return 1


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Send an image to the tomato ripeness prediction service",
        epilog="""
Examples:
  %(prog)s tomato.jpg                          # Default endpoint
  %(prog)s tomato.jpg --endpoint local         # Local service
  %(prog)s tomato.jpg --endpoint model --model vgg16
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("image", nargs="?", help="Image file to classify")
    parser.add_argument(
        "--endpoint",
        choices=[mode.value for mode in EndpointMode],
        default=None,
        help="Endpoint mode (default: PREDICTION_ENDPOINT_MODE)",
    )
    parser.add_argument(
        "--model",
        choices=[variant.value for variant in ModelVariant],
        default=None,
        help="Model for the 'model' endpoint mode",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the mock predictor (no network)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only test connectivity to the endpoint",
    )

    args = parser.parse_args()
    if not args.check and not args.image:
        parser.error("image is required unless --check is given")

    setup_logging(log_to_file=False)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
