"""
Configuration loader for PDFlyzer.

Loads settings from config.json and provides typed access via dataclasses.
Supports singleton pattern for global access and runtime reload capability.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .exceptions import ConfigurationError


@dataclass
class PathsConfig:
    """Configuration for file system paths."""
    logs_directory: Path


@dataclass
class ExtractionConfig:
    """Configuration for PDF extraction settings."""
    primary_backend: str
    fallback_backend: str
    supported_extensions: List[str]


@dataclass
class SearchConfig:
    """Configuration for term matching."""
    context_chars: int


@dataclass
class RenderConfig:
    """Configuration for page rendering and highlight overlays."""
    default_scale: float
    min_scale: float
    max_scale: float
    zoom_step: float
    highlight_delay_ms: int
    match_color: str
    next_word_color: str


@dataclass
class ExportConfig:
    """Configuration for CSV export."""
    default_filename: str
    encoding: str


@dataclass
class GUIConfig:
    """Configuration for Streamlit web interface."""
    page_title: str
    multi_file: bool
    results_preview_chars: int


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    max_file_size_mb: int
    backup_count: int


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig
    extraction: ExtractionConfig
    search: SearchConfig
    render: RenderConfig
    export: ExportConfig
    gui: GUIConfig
    logging: LoggingConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        project_root = config_path.parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def defaults(cls, project_root: Path = None) -> "Config":
        """Build a Config from built-in defaults only."""
        return cls._parse_config({}, project_root or Path.cwd())

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        paths_data = data.get("paths", {})
        paths = PathsConfig(
            logs_directory=cls._resolve_path(paths_data.get("logs_directory", "output/logs"), project_root)
        )

        ext_data = data.get("extraction", {})
        extraction = ExtractionConfig(
            primary_backend=ext_data.get("primary_backend", "pypdf"),
            fallback_backend=ext_data.get("fallback_backend", "pdfplumber"),
            supported_extensions=ext_data.get("supported_extensions", [".pdf"])
        )

        search_data = data.get("search", {})
        search = SearchConfig(
            context_chars=search_data.get("context_chars", 50)
        )

        if search.context_chars < 0:
            raise ConfigurationError(
                "search.context_chars must not be negative",
                {"context_chars": search.context_chars}
            )

        render_data = data.get("render", {})
        render = RenderConfig(
            default_scale=render_data.get("default_scale", 1.2),
            min_scale=render_data.get("min_scale", 0.6),
            max_scale=render_data.get("max_scale", 3.0),
            zoom_step=render_data.get("zoom_step", 0.2),
            highlight_delay_ms=render_data.get("highlight_delay_ms", 100),
            match_color=render_data.get("match_color", "rgba(139, 92, 246, 0.5)"),
            next_word_color=render_data.get("next_word_color", "rgba(245, 158, 11, 0.35)")
        )

        if not render.min_scale <= render.default_scale <= render.max_scale:
            raise ConfigurationError(
                "render.default_scale must lie between min_scale and max_scale",
                {
                    "default_scale": render.default_scale,
                    "min_scale": render.min_scale,
                    "max_scale": render.max_scale
                }
            )

        export_data = data.get("export", {})
        export = ExportConfig(
            default_filename=export_data.get("default_filename", "pdf_search_results.csv"),
            encoding=export_data.get("encoding", "utf-8")
        )

        gui_data = data.get("gui", {})
        gui = GUIConfig(
            page_title=gui_data.get("page_title", "PDFlyzer"),
            multi_file=gui_data.get("multi_file", True),
            results_preview_chars=gui_data.get("results_preview_chars", 120)
        )

        log_data = data.get("logging", {})
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "INFO"),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5)
        )

        return cls(
            paths=paths,
            extraction=extraction,
            search=search,
            render=render,
            export=export,
            gui=gui,
            logging=logging_cfg,
            project_root=project_root
        )

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If config cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()
        _config_instance = Config.from_file(config_path)

    return _config_instance


def _find_config_file() -> Path:
    """Search upward from current directory to find config/config.json."""
    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise ConfigurationError(
        "Could not find config/config.json in current directory or parents"
    )


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"Logs directory: {config.paths.logs_directory}")
        print(f"Primary backend: {config.extraction.primary_backend}")
        print(f"Context window: {config.search.context_chars}")
        print(f"Highlight delay: {config.render.highlight_delay_ms} ms")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
