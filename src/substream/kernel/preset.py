from dataclasses import dataclass, replace
from typing import Any, TypeVar

from . import settings

_SettingT = TypeVar('_SettingT', bound='_DefaultOverride')


@dataclass(frozen=True)
class _DefaultOverride(object):
    def __call__(self: _SettingT, **kwargs: Any) -> _SettingT:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class _WindowPreset(settings._WindowSetting, _DefaultOverride):
    pass


preset = _WindowPreset()
eager = preset(sync='eager')
