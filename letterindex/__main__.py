"""Main entry point for letterindex package."""

from loguru import logger

from letterindex.cli import create_parser
from letterindex.core import IndexOutOfRange, InvalidItemError, SectionedList, load_config
from letterindex.data import gather_items
from letterindex.output import format_selection, write_index
from letterindex.utils import add_log_file_handler, setup_logger


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config, args, parser)

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    items = gather_items(config)

    try:
        sections = SectionedList.from_items(items)
    except InvalidItemError as e:
        logger.error(f"✗ {e}")
        logger.error("  Remove empty items or pass --skip-empty")
        parser.exit(1)

    if config.verbose:
        logger.info(
            f"Grouped {len(items)} items into {sections.section_count()} sections: "
            f"{' '.join(sections.index_titles())}"
        )

    if config.select is not None:
        section, row = config.select
        try:
            print(format_selection(sections.item(section, row)))
        except IndexOutOfRange as e:
            logger.error(f"✗ Invalid selection: {e}")
            parser.exit(1)

    write_index(sections.index, config.output, config.format, config.verbose)


if __name__ == "__main__":
    main()
