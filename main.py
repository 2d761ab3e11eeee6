"""主程序入口 - 单个按键序列或批量CSV"""
import argparse
import logging

from config.config import BATCH_CONFIG, LOGGING_CONFIG, validate_config
from data.session_loader import load_key_sequences, replay_keys, run_key_sequences, summarize_results

logger = logging.getLogger(__name__)


def main(args):
    logging.basicConfig(
        level=getattr(logging, (args.log_level or LOGGING_CONFIG['level']).upper()),
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    if args.keys_file:
        logger.info("=== Batch mode ===")
        sequences = load_key_sequences(args.keys_file, args.key_column)
        results = run_key_sequences(sequences, args.key_column)

        output_path = args.output_path or BATCH_CONFIG['output_path']
        logger.info(f"Saving results to {output_path}")
        results.to_csv(output_path, index=False)

        summary = summarize_results(results)
        for status, count in summary.items():
            logger.info(f"  {status}: {count}")
        return 0

    if not args.keys:
        logger.error("No keys given. Pass keys (e.g. 2 + 3 x 4 =) or --keys_file")
        return 2

    display, status, _ = replay_keys(args.keys)
    print(display)
    return 0 if status == 'ok' else 1


def build_parser():
    parser = argparse.ArgumentParser(description="Infix calculator")

    parser.add_argument(
        "keys",
        nargs="*",
        help="Keys to press, separated by spaces (e.g. 2 + 3 x 4 =)"
    )
    parser.add_argument(
        "--keys_file",
        type=str,
        default=None,
        help="CSV file with one key sequence per row"
    )
    parser.add_argument(
        "--key_column",
        type=str,
        default=BATCH_CONFIG['key_column'],
        help="Name of the key sequence column"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG['output_path'],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )
    return parser


if __name__ == "__main__":
    raise SystemExit(main(build_parser().parse_args()))
