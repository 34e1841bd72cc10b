"""Persistent application settings."""

from __future__ import annotations

import configparser
import json
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, TypeVar, Union

PathLike = Union[str, "os.PathLike[str]"]

UNIT_METRIC = "Metric"
UNIT_US = "US"

_GENERAL = "general"
_RECIPE = "recipe"
_CALC = "calc"
_WINDOW = "window"

T = TypeVar("T")


@dataclass
class GeneralSettings:
    """General behaviour of the application."""

    lookfeel: str = ""
    showsplash: bool = True
    autosave: bool = True
    saveinterval: int = 5
    autobackup: bool = True
    loadlast: bool = True
    recentnum: int = 5
    recentfiles: List[str] = field(default_factory=list)


@dataclass
class RecipeSettings:
    """Defaults for new recipes."""

    batch: float = 5.0
    style: str = "Generic Ale"
    hoptype: str = "Pellet"


@dataclass
class CalcSettings:
    """Calculation preferences."""

    steepyield: float = 0.5
    efficiency: float = 0.75
    morey: bool = False
    tinseth: bool = True
    units: str = UNIT_US


@dataclass
class WindowSettings:
    """Main window state."""

    statusbar: bool = True


@dataclass
class ConfigState:
    """All settings together."""

    general: GeneralSettings = field(default_factory=GeneralSettings)
    recipe: RecipeSettings = field(default_factory=RecipeSettings)
    calc: CalcSettings = field(default_factory=CalcSettings)
    window: WindowSettings = field(default_factory=WindowSettings)


def _parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(text)


def _parse_uint(text: str) -> int:
    value = int(text.strip())
    if value < 0:
        raise ValueError(text)
    return value


def _read(
    parser: configparser.ConfigParser,
    section: str,
    key: str,
    default: T,
    convert: Callable[[str], T],
) -> T:
    if not parser.has_option(section, key):
        return default
    try:
        return convert(parser.get(section, key))
    except ValueError:
        return default


def _parse_list(text: str) -> List[str]:
    value = json.loads(text)
    if not isinstance(value, list):
        raise ValueError(text)
    return [str(item) for item in value]


def load_settings(path: PathLike) -> ConfigState:
    """Read settings from ``path``; missing or invalid entries keep their defaults.

    The deprecated ``hopform`` recipe key is honoured in place of ``hoptype``,
    and the recent file list is trimmed to ``recentnum`` entries.
    """
    state = ConfigState()
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    if os.path.exists(path):
        try:
            parser.read(path, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError):
            return state

    gen = state.general
    gen.lookfeel = _read(parser, _GENERAL, "lookfeel", gen.lookfeel, str)
    gen.showsplash = _read(parser, _GENERAL, "showsplash", gen.showsplash, _parse_bool)
    gen.autosave = _read(parser, _GENERAL, "autosave", gen.autosave, _parse_bool)
    gen.saveinterval = _read(parser, _GENERAL, "saveinterval", gen.saveinterval, _parse_uint)
    gen.autobackup = _read(parser, _GENERAL, "autobackup", gen.autobackup, _parse_bool)
    gen.loadlast = _read(parser, _GENERAL, "loadlast", gen.loadlast, _parse_bool)
    gen.recentnum = _read(parser, _GENERAL, "recentnum", gen.recentnum, _parse_uint)
    gen.recentfiles = _read(parser, _GENERAL, "recentfiles", gen.recentfiles, _parse_list)
    del gen.recentfiles[gen.recentnum:]

    rec = state.recipe
    rec.batch = _read(parser, _RECIPE, "batch", rec.batch, float)
    rec.style = _read(parser, _RECIPE, "style", rec.style, str)
    if parser.has_option(_RECIPE, "hopform"):
        rec.hoptype = _read(parser, _RECIPE, "hopform", rec.hoptype, str)
    else:
        rec.hoptype = _read(parser, _RECIPE, "hoptype", rec.hoptype, str)

    calc = state.calc
    calc.steepyield = _read(parser, _CALC, "steepyield", calc.steepyield, float)
    calc.efficiency = _read(parser, _CALC, "efficiency", calc.efficiency, float)
    calc.morey = _read(parser, _CALC, "morey", calc.morey, _parse_bool)
    calc.tinseth = _read(parser, _CALC, "tinseth", calc.tinseth, _parse_bool)
    calc.units = _read(parser, _CALC, "units", calc.units, str)

    win = state.window
    win.statusbar = _read(parser, _WINDOW, "statusbar", win.statusbar, _parse_bool)
    return state


def _encode(value: Any) -> str:
    """Render a setting value in the form ``load_settings`` reads back."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (list, tuple)):
        return json.dumps([str(item) for item in value])
    return str(value)


def _section(values: Dict[str, Any]) -> Dict[str, str]:
    return {key: _encode(value) for key, value in values.items()}


def save_settings(state: ConfigState, path: PathLike) -> None:
    """Write ``state`` to ``path``."""
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    gen, rec, calc = state.general, state.recipe, state.calc
    parser[_GENERAL] = _section(
        {
            "lookfeel": gen.lookfeel,
            "showsplash": bool(gen.showsplash),
            "autosave": bool(gen.autosave),
            "saveinterval": int(gen.saveinterval),
            "autobackup": bool(gen.autobackup),
            "loadlast": bool(gen.loadlast),
            "recentnum": int(gen.recentnum),
            "recentfiles": list(gen.recentfiles),
        }
    )
    parser[_RECIPE] = _section(
        {
            "batch": float(rec.batch),
            "style": rec.style,
            "hoptype": rec.hoptype,
        }
    )
    parser[_CALC] = _section(
        {
            "steepyield": float(calc.steepyield),
            "efficiency": float(calc.efficiency),
            "morey": bool(calc.morey),
            "tinseth": bool(calc.tinseth),
            "units": calc.units,
        }
    )
    parser[_WINDOW] = _section({"statusbar": bool(state.window.statusbar)})
    with open(path, "w", encoding="utf-8") as handle:
        parser.write(handle)