import argparse
import logging
import multiprocessing
import os
import sys
from typing import List, Optional, Tuple

from . import config
from .exceptions import SkinError
from .logging_config import setup_logging
from .skin_loader import SkinLoader
from .sources import TextureSource

logger = logging.getLogger(__name__)


def is_directory_output(output: str) -> bool:
    return os.path.isdir(output) or output.endswith(os.sep)


def resolve_output_path(source: str, output: Optional[str]) -> str:
    if os.path.exists(source):
        base_name = os.path.basename(source).rsplit('.', 1)[0]
    else:
        # URL or username
        base_name = source.rstrip('/').rsplit('/', 1)[-1] or "texture"

    file_name = f"{base_name}{config.OUTPUT_SUFFIX}.png"
    if not output:
        return os.path.join(os.path.dirname(source) if os.path.exists(source) else "", file_name)
    if is_directory_output(output):
        os.makedirs(output, exist_ok=True)
        return os.path.join(output, file_name)
    return output


def process_texture(source: str, output: Optional[str], cape: bool, model_only: bool) -> bool:
    """
    Normalizes a single skin or cape.
    Returns: Success
    """
    try:
        image = TextureSource.load(source, texture="CAPE" if cape else "SKIN")
        if cape:
            surface = SkinLoader.normalize_cape(image)
            logger.info("%s: cape %dx%d -> %dx%d", source, image.width, image.height, surface.width, surface.height)
        else:
            surface, model = SkinLoader.normalize_skin(image)
            if model_only:
                print(f"{source}: {model}")
                return True
            logger.info("%s: %s model, %dx%d -> %dx%d", source, model, image.width, image.height, surface.width, surface.height)

        final_output = resolve_output_path(source, output)
        surface.to_image().save(final_output)
        logger.info("Saved %s", final_output)
        return True
    except SkinError as e:
        logger.error("Error processing %s: %s", source, e)
        return False
    except OSError as e:
        logger.error("Error writing output for %s: %s", source, e)
        return False


def process_texture_wrapper(args: Tuple[str, Optional[str], bool, bool]) -> bool:
    return process_texture(*args)


def collect_inputs(input_path: str) -> List[str]:
    if os.path.isdir(input_path):
        files = sorted(
            os.path.join(input_path, f) for f in os.listdir(input_path) if f.lower().endswith('.png')
        )
        logger.info("Found %d textures in directory.", len(files))
        return files
    return [input_path]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Normalize Minecraft skins and capes to the modern layout.")
    parser.add_argument("-i", "--input", required=True, help="Skin file, directory of .png files, URL or username")
    parser.add_argument("-o", "--output", help="Output directory or file")
    parser.add_argument("--cape", action="store_true", help="Treat inputs as capes")
    parser.add_argument("--model-only", action="store_true", help="Print the inferred model type of skins without writing files")
    parser.add_argument("-j", "--jobs", type=int, default=1, help="Worker processes for directories")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level")
    parser.add_argument("--log-file", help="Append DEBUG logs to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cape and args.model_only:
        parser.error("--model-only infers the arm model of skins and cannot be combined with --cape")

    setup_logging(getattr(logging, args.log_level), args.log_file)

    files_to_process = collect_inputs(args.input)
    if not files_to_process:
        logger.error("No valid input files found.")
        return 1
    if len(files_to_process) > 1 and args.output and not is_directory_output(args.output):
        parser.error(f"--output must be a directory when processing {len(files_to_process)} inputs")

    tasks = [(f, args.output, args.cape, args.model_only) for f in files_to_process]
    workers = max(1, min(args.jobs, len(tasks)))

    if workers > 1:
        logger.info("Batch processing %d textures using %d workers...", len(tasks), workers)
        with multiprocessing.Pool(processes=workers) as pool:
            results = pool.map(process_texture_wrapper, tasks)
    else:
        results = [process_texture_wrapper(task) for task in tasks]

    success_count = sum(1 for r in results if r)
    if len(tasks) > 1:
        logger.info("Batch Complete. %d/%d successful.", success_count, len(tasks))
    return 0 if success_count == len(tasks) else 1


if __name__ == "__main__":
    multiprocessing.freeze_support()  # Windows support
    sys.exit(main())
