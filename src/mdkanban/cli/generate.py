"""Generate command for creating default config and a starter board."""

import logging
from pathlib import Path

import yaml

from ..document import serialize
from ..models import Board, KanbanConfig
from ..repositories import MarkdownFileRepository
from ..services import BoardService, ConfigService
from .output import info, success

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = ("To Do", "In Progress", "Done")

# Header comments for generated file
CONFIG_HEADER = """\
# mdkanban Board Configuration
#
# document: Board markdown file, relative to this directory
#
# task_header: How task headers are written on save
#   - heading: "### TSK_1 Title"
#   - list:    "- TSK_1 Title"
#
# self_save_window: Seconds after a save during which change
#   notifications for the document are treated as our own write

"""


def generate_config_yaml() -> str:
    """Generate YAML config from the default KanbanConfig model."""
    config_dict = KanbanConfig.default().model_dump(mode="json")
    yaml_content = yaml.dump(config_dict, default_flow_style=False, sort_keys=False)
    return CONFIG_HEADER + yaml_content


def starter_board(title: str = "Kanban") -> Board:
    """Empty board with the default columns."""
    board = Board(title=title)
    service = BoardService()
    for column_title in DEFAULT_COLUMNS:
        service.add_column(board, column_title)
    return board


def run_generate(project_root: Path) -> int:
    """
    Generate default configuration and a starter board document.

    Args:
        project_root: Path to project root where mdkanban.yml will be created

    Returns:
        Exit code (0 = success, 1 = nothing to do)
    """
    created = False
    config_service = ConfigService(project_root)
    config_path = config_service.config_path

    if config_path.exists():
        info(f"Config exists: {config_path}")
    else:
        project_root.mkdir(parents=True, exist_ok=True)
        config_path.write_text(generate_config_yaml())
        success(f"Generated config: {config_path}")
        created = True

    config = config_service.get_config()
    repository = MarkdownFileRepository(project_root / config.document)
    if repository.exists():
        info(f"Document exists: {repository.path}")
    else:
        repository.write(serialize(starter_board(), config.task_header))
        success(f"Created board: {repository.path}")
        logger.info("Created starter board at %s", repository.path)
        created = True

    if not created:
        print("Nothing to generate.")
        return 1

    return 0
