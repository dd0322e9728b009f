# valuesources

Look up a value from an ordered list of places: environment variables,
files, or keys in a nested mapping. The first place that has a value wins.
It is meant for giving command-line flags fallback values.

Everything lives in the `valuesources.sources` module.

## Installing

```
pip install valuesources
```

## Sources

Every source is a `ValueSource` with a `lookup()` method. It returns the
value as a string, or `None` when the source has no value.

```python
from valuesources.sources import env_var, file_source

env_var("HOME").lookup()               # "/home/me"
file_source("/no/such/file").lookup()  # None
```

- `env_var(key)` returns an `EnvVarValueSource` that reads the environment
  variable `key`; surrounding whitespace in the key is ignored.
  `is_from_env()` returns `True` for it.
- `file_source(path)` returns a `FileValueSource` that reads the whole file
  at `path`. A file that cannot be read gives `None`.
- `MapValueSource(key, MapSource(name, mapping))` looks up a dot-separated
  key such as `"server.port"` in a nested mapping and renders the value as
  text with `format_value`.

`str()` of a source gives a short description for help text, such as
`environment variable "HOME"` or `file "/etc/app/port"`; `repr()` shows
its structure.

## Chains

`ValueSourceChain(*sources)` holds sources in order and returns the first
value found.

```python
from valuesources.sources import env_vars, files

chain = env_vars("APP_PORT", "PORT")
chain.append(files("/etc/app/port"))

chain.lookup()               # first value found, or None
found = chain.lookup_with_source()
if found is not None:
    value, source = found
    print(source)            # e.g. environment variable "PORT"

chain.env_keys()             # ["APP_PORT", "PORT"]
```

`env_vars(*keys)` and `files(*paths)` build chains of environment variable
and file sources. `append(other)` adds the sources of another chain to the
end. `str(chain)` joins the descriptions of its sources with commas; an
empty chain gives the empty string.

## Nested maps

```python
from valuesources.sources import MapSource, MapValueSource

config = MapSource("config", {"server": {"port": 8080, "hosts": ["a", "b"]}})

MapValueSource("server.port", config).lookup()    # "8080"
MapValueSource("server.hosts", config).lookup()   # "[a b]"
MapValueSource("server.host", config).lookup()    # None

config.lookup("server.port")                       # 8080
config.lookup("server.host")                       # raises KeyError
```

Only mappings are descended into; a key whose path passes through any other
kind of value is not found. An empty key is never found.

## Rendering values

`format_value(value)` turns a looked-up value into text: `None` becomes
`<nil>`, booleans `true` / `false`, strings stay as they are, very large or
very small floats use exponent form (`1e+06`), lists and tuples become
`[a b c]`, and mappings become `map[key:value ...]` with keys sorted.

## What it does not do

The package only finds values. It does not parse command lines, define
flags or commands, or convert values to types other than strings; that is
left to the program using it.