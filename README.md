# brewcalc

Brewing recipe helpers for scripts, with a small command line front end.

## What is in it

- `brewcalc.quantity`: `Unit`, `Quantity`, `Weight`, `Volume` and
  `Temperature`. Units convert between grams, kilograms, ounces and pounds;
  barrels, gallons, hectoliters, liters, milliliters and fluid ounces;
  Fahrenheit and Celsius. `Quantity.convert` converts in place,
  `amount_in` returns the converted amount, `to_string(prec)` formats as
  `"<amount> <symbol>"` and `Quantity.from_string` reads that form back
  (an unknown symbol falls back to the default unit). `lookup_unit(symbol)`
  finds a unit by its symbol. Converting between units that have no
  conversion gives `0.0`; adding or subtracting a quantity in such a unit
  leaves the amount unchanged. `fahrenheit_to_celsius` and
  `celsius_to_fahrenheit` are plain functions.
- `brewcalc.misc`: the `Misc` ingredient (name, quantity, type, notes),
  the `MiscType` enum and `type_names()`.
- `brewcalc.miscmodel`: `MiscTable`, an editable table of `Misc` rows over a
  list you supply, with `data`, `set_data`, `insert_row`, `remove_row`,
  `header` and `sort`. Cells are addressed by `MiscColumn` and read for a
  `Role` (display text, edit value or alignment). Setting a known name
  copies type and notes from the catalog; an empty name deletes the row
  after the `confirm` callable agrees. Callables in `on_modified` run after
  each change.
- `brewcalc.miscdelegate`: `editor_spec` describes the input control for a
  cell as an `EditorSpec` of some `EditorKind`; `editor_value` and
  `commit_editor` move values between a `MiscTable` and an editor.
- `brewcalc.hydrometer`: `corrected_gravity(reading, sample, calibrated, unit)`
  corrects a specific-gravity reading for sample and calibration
  temperature; `format_gravity` prints it with three decimals.
- `brewcalc.settings`: `ConfigState` with `GeneralSettings`,
  `RecipeSettings`, `CalcSettings` and `WindowSettings`;
  `load_settings(path)` and `save_settings(state, path)` read and write an
  INI file. Missing or invalid entries keep their defaults.
- `brewcalc.session`: `Session` keeps the current file name, picks the file
  to open at start-up, maintains the recent file list, makes one `<file>~`
  backup per file, builds the window caption and names the autosave file.
- `brewcalc.paths`: `data_base(app_dir, platform)` and
  `doc_base(app_dir, platform)` work out where data files and help documents
  live relative to the executable's directory.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
brewcalc --help
brewcalc --version
brewcalc recipe.qbrew
```

`--help` (also `-h`, `-help`) prints the usage and `--version` (also `-v`,
`-version`) the version; both exit with status 0. Any other argument that
starts with `-` is reported as invalid, followed by the usage, with status 1.

The first plain argument names the recipe file. Settings are read from the
file named by the `BREWCALC_CONFIG` environment variable, or from
`~/.config/qbrew.ini`. With no file given and `loadlast` set, the most recent
file is used if it still exists; otherwise the command reports that a new
recipe was created. A named file that does not exist is reported as an error
with status 1.

## Examples

```python
from brewcalc.quantity import Weight, Volume

hops = Weight(1.0, Weight.ounce)
hops.convert(Weight.gram)
print(hops.to_string(3))          # 28.350 g

batch = Volume(5.0, Volume.gallon)
print(batch.amount_in(Volume.liter))
```

```python
from brewcalc.quantity import Temperature
from brewcalc.hydrometer import corrected_gravity, format_gravity

sg = corrected_gravity(1.050, 80.0, 60.0, Temperature.fahrenheit)
print(format_gravity(sg))
```

```python
from brewcalc.misc import Misc
from brewcalc.miscmodel import MiscTable, MiscColumn, Role
from brewcalc.quantity import Weight

rows = [Misc("Irish Moss", Weight(1.0, Weight.ounce), "Fining")]
table = MiscTable(rows, catalog={}, default_unit=Weight.ounce)
print(table.data(0, MiscColumn.QUANTITY, Role.DISPLAY))   # 1.000 oz
```

## What it does not do

There is no graphical interface and no recipe document: the package does not
read, write, print or export recipe files, and it has no grains, hops or
styles, no bitterness or gravity calculations for a whole recipe, and no
alcohol tool. The command line only checks which file would be opened; it
does not load its contents, and it does not save the recent file list back to
the settings file.