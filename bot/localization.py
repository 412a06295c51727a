"""
Language bundle loading.

Each module of the languages package exports a STRINGS dict mapping a
message key to a string or to a function returning a string. The
default language is the authority on which keys exist: every other
bundle is backfilled from it when it is loaded.
"""

import importlib
import pkgutil
import sys
from typing import Any, Dict, List

from utils.errors import LanguageLoadError
from utils.logger import get_logger

logger = get_logger("Languages")


class LanguageBundle(dict):
    """Message templates of one language, readable as attributes."""

    def __init__(self, code: str, strings: Dict[str, Any]):
        super().__init__(strings)
        self.code = code

    def __getattr__(self, key: str) -> Any:
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key) from None


class LanguageRegistry:
    """Loads and holds every language bundle."""

    def __init__(self, package: str = "languages", default: str = "en"):
        self.package = package
        self.default = default
        self._bundles: Dict[str, LanguageBundle] = {}

    def load_all(self) -> Dict[str, LanguageBundle]:
        """
        Load the default bundle, then every other bundle backfilled from it.

        Returns:
            Mapping of language code to bundle
        """
        bundles: Dict[str, LanguageBundle] = {}

        default = self._load_bundle(self.default)
        bundles[self.default] = default

        package = importlib.import_module(self.package)
        modules = sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name)
        for module in modules:
            code = module.name
            if code == self.default or code.startswith("_") or module.ispkg:
                continue

            bundle = self._load_bundle(code)
            for key, value in default.items():
                if key not in bundle:
                    bundle[key] = value

            bundles[code] = bundle
            logger.debug(f"loaded {code} language.")

        self._bundles = bundles
        logger.info("successfully loaded all language files.")
        return bundles

    def reload(self) -> Dict[str, LanguageBundle]:
        """Drop cached language modules and load every bundle again."""
        prefix = f"{self.package}."
        for name in [n for n in sys.modules if n.startswith(prefix)]:
            del sys.modules[name]
        importlib.invalidate_caches()

        return self.load_all()

    def get(self, code: str) -> LanguageBundle:
        """
        Get a loaded bundle.

        Raises:
            KeyError: If no bundle has this code
        """
        return self._bundles[code]

    @property
    def default_bundle(self) -> LanguageBundle:
        return self._bundles[self.default]

    @property
    def codes(self) -> List[str]:
        return list(self._bundles)

    def __contains__(self, code: object) -> bool:
        return code in self._bundles

    def __len__(self) -> int:
        return len(self._bundles)

    def _load_bundle(self, code: str) -> LanguageBundle:
        module = importlib.import_module(f"{self.package}.{code}")
        strings = getattr(module, "STRINGS", None)
        if not isinstance(strings, dict):
            raise LanguageLoadError("language module has no STRINGS dict", language=code)
        return LanguageBundle(code, strings)
