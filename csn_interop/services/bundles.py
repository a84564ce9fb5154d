"""
Folder based i18n bundle provider.

Looks up the text bundles of a CDS application on disk:
- ``<basename>.properties`` is the default bundle (locale "")
- ``<basename>_<locale>.properties`` holds the texts of one locale
- ``<basename>.json`` holds ``{locale: {key: text}}`` for several locales
"""

import json
import logging
from pathlib import Path
from typing import Any

from csn_interop.config import get_settings
from csn_interop.utils.properties import read_properties

logger = logging.getLogger(__name__)

DEFAULT_LOCALE_ALIASES = ("", "default")


class BundleFormatError(ValueError):
    """Raised when a JSON bundle does not map locales to text objects."""


class FolderBundleProvider:
    """
    Provides (locale, texts) pairs for a CSN from i18n folders.

    Search roots are the configured project root and the directories of
    all files listed in the CSN's ``$sources``. In each root the first
    existing i18n folder is used. Parsed folders are cached; callers
    always receive copies of the texts.
    """

    def __init__(
        self,
        project_root: Path | None = None,
        folders: list[str] | None = None,
        basename: str | None = None,
    ):
        settings = get_settings()
        self.project_root = Path(project_root or settings.project_root)
        self.folders = folders if folders is not None else settings.i18n_folders
        self.basename = basename or settings.i18n_basename

        self._folder_cache: dict[Path, dict[str, dict[str, str]]] = {}

    def __call__(self, csn: dict[str, Any]) -> list[tuple[str, dict[str, str]]]:
        return self.bundles_for(csn)

    def _search_roots(self, csn: dict[str, Any]) -> list[Path]:
        roots = [self.project_root]
        for source in csn.get("$sources") or []:
            source_path = Path(source)
            if not source_path.is_absolute():
                source_path = self.project_root / source_path
            roots.append(source_path.parent)

        unique: list[Path] = []
        for root in roots:
            resolved = root.resolve()
            if resolved not in unique:
                unique.append(resolved)
        return unique

    def find_i18n_folder(self, root: Path) -> Path | None:
        """Get the first configured i18n folder existing below a root."""
        for name in self.folders:
            candidate = root / name
            if candidate.is_dir():
                return candidate
        return None

    def _locale_from_filename(self, path: Path) -> str | None:
        stem = path.stem
        if stem == self.basename:
            return ""
        prefix = f"{self.basename}_"
        if stem.startswith(prefix) and len(stem) > len(prefix):
            return stem[len(prefix) :]
        return None

    def _read_json_bundle(self, path: Path) -> dict[str, dict[str, str]]:
        logger.debug(f"Reading JSON bundle: {path}")
        text = path.read_text(encoding="utf-8-sig")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise BundleFormatError(f"{path} is not valid JSON: {e}") from e
        if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
            raise BundleFormatError(f"{path} must map locales to text objects")

        bundles: dict[str, dict[str, str]] = {}
        for locale, texts in data.items():
            if locale in DEFAULT_LOCALE_ALIASES:
                locale = ""
            bundles.setdefault(locale, {}).update({str(k): str(v) for k, v in texts.items()})
        return bundles

    def load_folder(self, folder: Path) -> dict[str, dict[str, str]]:
        """
        Load all bundles of an i18n folder.

        Returns:
            Mapping from locale ("" for the default bundle) to texts
        """
        if folder in self._folder_cache:
            return self._folder_cache[folder]

        bundles: dict[str, dict[str, str]] = {}

        json_file = folder / f"{self.basename}.json"
        if json_file.is_file():
            try:
                bundles.update(self._read_json_bundle(json_file))
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Could not read {json_file}: {e}")

        for path in sorted(folder.glob(f"{self.basename}*.properties")):
            locale = self._locale_from_filename(path)
            if locale is None:
                continue
            try:
                texts = read_properties(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Could not read {path}: {e}")
                continue
            bundles.setdefault(locale, {}).update(texts)

        logger.debug(f"Loaded {len(bundles)} bundles from {folder}")
        self._folder_cache[folder] = bundles
        return bundles

    def bundles_for(self, csn: dict[str, Any]) -> list[tuple[str, dict[str, str]]]:
        """
        Collect the text bundles of the application a CSN belongs to.

        Bundles of later roots add to, and override texts of, earlier ones.

        Returns:
            (locale, texts) pairs sorted by locale
        """
        merged: dict[str, dict[str, str]] = {}
        for root in self._search_roots(csn):
            folder = self.find_i18n_folder(root)
            if folder is None:
                continue
            for locale, texts in self.load_folder(folder).items():
                merged.setdefault(locale, {}).update(texts)

        return [(locale, dict(merged[locale])) for locale in sorted(merged)]

    def clear_cache(self) -> None:
        """Forget all parsed bundle folders."""
        self._folder_cache.clear()
