# media_finder

`media_finder` walks a directory tree at a fixed interval and picks out audio,
video and image files by their extension. After each scan it publishes the
list of files it found. The report is a JSON object with three arrays. Its keys
are written in sorted order and it is indented by two spaces:

```json
{
  "audio": [
    "/home/me/music/song.mp3"
  ],
  "images": [
    "/home/me/photos/cat.jpg"
  ],
  "video": [
    "/home/me/clips/trip.mkv"
  ]
}
```

## Installation

```
pip install .
```

To install the test dependencies as well, run `pip install .[test]`.

## Command line

```
media-finder [--dir DIRECTORY] [--interval SECONDS] [--report json|http]
```

You can also run it as `python -m media_finder.cli` with the same options.

- `--dir`: the directory to scan recursively. The default is the directory in
  `$HOME`. It must exist and be a directory.
- `--interval`: the number of seconds to wait between scans. The default is 30,
  and the value must be a positive integer.
- `--report`: where the report goes. The value is not case-sensitive.
  - `json` (the default) writes the report to `$HOME/.media_files` after every scan.
  - `http` serves the report at `http://localhost:1234/media_files`. Any other
    path returns 404.

The program scans repeatedly until it is interrupted. After every report it
writes, it prints `Report written`. Exit statuses:

- `1`: a bad argument, a missing `HOME`, a server that cannot start (for
  example because the port is in use), or any other error. The program prints
  `Error: <message>` to standard error before exiting.
- `130`: the program was interrupted with Ctrl-C.

Example:

```
media-finder --dir ~/Pictures --interval 60 --report http
```

## Recognised extensions

- Audio: `.mp3 .wav .flac .ogg .aac .m4a .opus .wma .aiff .ape`
- Video: `.mp4 .mkv .avi .mov .mpg .mpeg .flv .webm .wmv .m4v .3gp`
- Images: `.jpg .jpeg .png .gif .bmp .webp .tiff .tif .svg .heic .raw`

Extensions are matched without regard to case.

## Library use

```python
from media_finder.checker import FileType, MultimediaChecker
from media_finder.dirvisitor import DirVisitor
from media_finder.reportwriter import JSONWriter, build_report

visitor = DirVisitor(MultimediaChecker())
found = visitor.visit("/some/dir")   # {FileType.AUDIO: [...], ...}
print(build_report(found))           # {"audio": [...], "video": [...], "images": [...]}

JSONWriter("/tmp/report.json").write_report(found)
```

The modules are:

- `media_finder.checker`: the `FileType` enum, the `FileChecker` base class,
  `MultimediaChecker`, and `file_type_name()`.
  - `MultimediaChecker.check(path)` returns `FileType.NONE` for files that are
    not media.
- `media_finder.dirvisitor`: `DirVisitor`.
  - `visit(root)` returns a dict that maps each `FileType` to a list of paths.
  - It skips directories it is not permitted to read.
  - It raises an error if `root` does not exist.
- `media_finder.reportwriter`: `ReportType`, `home_dir()`, `build_report()`,
  and the writers `JSONWriter` and `HTTPWriter`.
  - `JSONWriter(path=None)` writes to `$HOME/.media_files` when no path is
    given. It raises `RuntimeError` if it cannot open the file.
  - `HTTPWriter(host="localhost", port=1234)` starts serving as soon as it is
    created. It raises `RuntimeError` if it cannot bind.
  - `HTTPWriter.current_report()` returns the JSON text that is currently
    served.
  - Call `HTTPWriter.close()`, or use the writer as a context manager, to stop
    the server.
- `media_finder.checkmanager`: `make_writer(report_type)` and `CheckManager`.
  - `CheckManager.run_once()` does a single scan and publishes the report.
  - `CheckManager.run()` keeps scanning at the configured interval.
  - `CheckManager.close()` releases the writer.
- `media_finder.cli`: `CmdArgs`, `parse_args(argv)` and `main(argv)`.
  - `parse_args` raises `ValueError` on a bad argument.

## Limitations

The command line always serves HTTP reports on `localhost:1234`. To use a
different host or port, create an `HTTPWriter` yourself.