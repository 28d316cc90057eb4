# patternkit

Small, self-contained examples of classic object-oriented design patterns,
each as a usable Python module. No third-party libraries are needed.

| Module                     | Pattern   | What it models                                  |
|----------------------------|-----------|-------------------------------------------------|
| `patternkit.media`         | Adapter   | An audio player that plays mp3 itself and adapts mp4, vlc and flac players |
| `patternkit.houses`        | Builder   | Wooden, stone and glass house builders          |
| `patternkit.organization`  | Composite | Departments and employees with a salary budget  |
| `patternkit.documents`     | Prototype | Text boxes, images, tables and charts that clone themselves |
| `patternkit.registry`      | Prototype | A registry handing out clones of stored prototypes |
| `patternkit.filelogger`    | Singleton | One process-wide logger appending to a file     |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Three of the modules come with a demonstration command:

```
patternkit-media        # plays mp3, mp4, vlc and flac samples, then rejects "avi"
patternkit-org          # prints a sample organisational chart and its total salary budget
patternkit-prototypes   # registers sample document elements, clones them and prints the clones
```

## Usage

### Adapter

`AudioPlayer.play(audio_type, file_name)` plays `"mp3"` through an
`Mp3Player` and hands `"mp4"`, `"vlc"` and `"flac"` to a `MediaAdapter`,
which wraps the matching `Mp4Player`, `VlcPlayer` or `FlacPlayer`. Any other
type prints `Invalid media format: <type>`.

```python
from patternkit.media import AudioPlayer

player = AudioPlayer()
player.play("mp3", "song.mp3")     # Playing mp3 file. Name: song.mp3
player.play("flac", "audio.flac")  # Playing flac file. Name: audio.flac
player.play("avi", "clip.avi")     # Invalid media format: avi
```

### Builder

A builder starts a `House` with `create_new_house()` and fills in its parts
with `build_walls()`, `build_roof()`, `build_doors()` and `build_windows()`.
Calling a build step before `create_new_house()` raises `RuntimeError`.

```python
from patternkit.houses import StoneHouseBuilder

builder = StoneHouseBuilder()
builder.create_new_house()
builder.build_walls()
builder.build_roof()
builder.build_doors()
builder.build_windows()
builder.house.show()
# House with stone walls, stone slab roof, metal doors, and reinforced glass windows.
```

### Composite

`Employee` and `Department` share the `OrgComponent` interface:
`display_info(indent=0)` prints the tree, indenting each level by four more
spaces, and `salary_budget()` sums the salaries below a node.

```python
from patternkit.organization import Department, Employee

dev = Department("Development Department")
dev.add(Employee("Charlie Davis", "Developer", 90000))
dev.add(Employee("Dana Lee", "Developer", 95000))
print(dev.salary_budget())  # 185000.0
dev.display_info()
```

### Prototype

`TextBox`, `Image`, `Table` and `Chart` each have `clone()`, which returns an
independent deep copy, and `print()`. `PrototypeRegistry.create_clone(key)`
returns a clone of the prototype stored under `key` and raises `KeyError` if
there is none.

```python
from patternkit.documents import TextBox
from patternkit.registry import PrototypeRegistry

registry = PrototypeRegistry()
registry.register_prototype("TextBox", TextBox("Default Text", 12))
box = registry.create_clone("TextBox")
box.text = "Hello"
box.print()  # TextBox: "Hello" (Font size: 12)
```

### Singleton

`FileLogger.get_instance(log_file)` opens the file for appending on the first
call only; later calls return the same logger whatever file they name. If the
file cannot be opened, a message goes to standard error and `log()` does
nothing.

```python
from patternkit.filelogger import FileLogger

logger = FileLogger.get_instance("app.log")
logger.log("started")
assert FileLogger.get_instance("other.log") is logger
```

## What it does not do

The players only print what they would play; no media is decoded or output.
There is no director object for the builders, and no command for the builder
or the logger: their steps are called from your own code.