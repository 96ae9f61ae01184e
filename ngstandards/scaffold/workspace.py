"""Edits of the JSON files generated by the Angular CLI.

Only the touched fields are validated and changed (the ``scripts`` map of
package.json and the build ``assets`` list of angular.json); every other
key, and the key order, is written back as it was read.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import TypeAdapter, ValidationError

from ngstandards.core.errors import ConfigParseFailure
from ngstandards.core.logger import get_logger
from ngstandards.scaffold.templates import write_text

logger = get_logger(__name__)

PACKAGE_SCRIPTS: Dict[str, str] = {
    "build:prod": "ng build --configuration production",
    "watch": "ng build --watch --configuration development",
    "lint": "ng lint --max-warnings=0",
    "lint:fix": "ng lint --fix",
    "prettier-format": 'prettier --ignore-path .gitignore --write "**/*.+(js|ts|json)"',
    "lint-fix-format": "npm run prettier-format && npm run lint:fix && npm run prettier-format",
}

ASSETS_ENTRY: Dict[str, str] = {"glob": "**/*", "input": "src/assets"}

ScriptsSection = TypeAdapter(Dict[str, str])
AssetsList = TypeAdapter(List[Union[str, Dict[str, Any]]])


def load_json_object(path: Path) -> Dict[str, Any]:
    """Read a JSON file that must contain an object.

    Raises:
        ConfigParseFailure: If the file is missing, invalid or not an object
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigParseFailure(path, "file not found") from e
    except (OSError, ValueError) as e:
        raise ConfigParseFailure(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigParseFailure(path, "expected a JSON object at the top level")
    return data


def save_json(path: Path, data: Dict[str, Any]) -> None:
    write_text(path, json.dumps(data, indent=2, ensure_ascii=False))


def merge_package_scripts(path: Path, scripts: Dict[str, str] = PACKAGE_SCRIPTS) -> Dict[str, str]:
    """Merge script entries into package.json.

    Existing scripts are kept; entries with the same name are replaced.

    Args:
        path: package.json path
        scripts: Script name to command mapping

    Returns:
        The resulting scripts section

    Raises:
        ConfigParseFailure: If package.json cannot be read or its scripts
            section is not a string mapping
    """
    manifest = load_json_object(path)

    try:
        current = ScriptsSection.validate_python(manifest.get("scripts") or {})
    except ValidationError as e:
        raise ConfigParseFailure(path, f"unexpected 'scripts' section: {e.error_count()} error(s)") from e

    merged = {**current, **scripts}
    manifest["scripts"] = merged
    save_json(path, manifest)
    logger.debug(f"Merged {len(scripts)} scripts into {path}")
    return merged


def add_build_assets(path: Path, project_name: str, entry: Dict[str, str] = ASSETS_ENTRY) -> bool:
    """Add an assets entry to the project's build options in angular.json.

    Returns:
        True if angular.json was changed, False when the build options are
        absent or the entry is already listed

    Raises:
        ConfigParseFailure: If angular.json cannot be read or the assets
            value is not a list
    """
    workspace = load_json_object(path)

    options = _lookup(workspace, "projects", project_name, "architect", "build", "options")
    if options is None:
        logger.warning(f"No build options for '{project_name}' in {path}, assets left unchanged")
        return False

    try:
        assets = AssetsList.validate_python(options.get("assets") or [])
    except ValidationError as e:
        raise ConfigParseFailure(path, f"unexpected 'assets' value: {e.error_count()} error(s)") from e

    if entry in assets:
        return False

    options["assets"] = assets + [dict(entry)]
    save_json(path, workspace)
    logger.debug(f"Added assets entry {entry} to {path}")
    return True


def _lookup(data: Dict[str, Any], *keys: str) -> Union[Dict[str, Any], None]:
    node: Any = data
    for key in keys:
        if not isinstance(node, dict) or not isinstance(node.get(key), dict):
            return None
        node = node[key]
    return node
