"""wardist init command - Scaffold a web distribution project.

Creates a root wardist.yaml with a `webapp` convention, one module
directory per --module with a minimal web application, and an
explodedDist distribution resolving all of them.
"""

from __future__ import annotations

import re
from pathlib import Path

import click

from wardist_cli.output import error, success, warning

DEFAULT_MODULES = ("date", "hello")

_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_.-]*$")

BUILD_FILE_TEMPLATE = """\
# {{ name }} - wardist build
# yaml-language-server: $schema=./schemas/wardist.schema.json
#
# Each module applies the `webapp` convention, which publishes the module's
# war on a consumable channel tagged type=war. The root `wars` channel
# resolves every module's matching channel.

name: "{{ name }}"
version: "{{ version }}"
{% if group %}
group: {{ group }}
{% endif %}

conventions:
  webapp:
    channels:
      - name: wars
        role: producer
        attributes:
          type: war
        artifact:
          type: war

modules:
{% for module in modules %}
  - name: {{ module }}
    conventions: [webapp]
{% endfor %}

channels:
  - name: wars
    role: consumer
    attributes:
      type: war
    dependencies: [{{ modules | join(", ") }}]

distributions:
  - name: explodedDist
    channel: wars
    into: explodedDist
"""

INDEX_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head><title>{{ module }}</title></head>
<body>
<h1>{{ module }}</h1>
<p>Part of {{ name }} {{ version }}.</p>
</body>
</html>
"""

WEB_XML_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<web-app xmlns="http://java.sun.com/xml/ns/javaee" version="2.5">
  <display-name>{{ module }}</display-name>
  <welcome-file-list>
    <welcome-file>index.html</welcome-file>
  </welcome-file-list>
</web-app>
"""


@click.command()
@click.option(
    "-n",
    "--name",
    "name",
    type=str,
    default=None,
    help="Project name [default: current directory name]",
)
@click.option(
    "-m",
    "--module",
    "modules",
    type=str,
    multiple=True,
    help="Module to create; repeat for several [default: date, hello]",
)
@click.option(
    "--version",
    "version",
    type=str,
    default="1.0",
    help="Project version [default: 1.0]",
)
@click.option(
    "--group",
    "group",
    type=str,
    default=None,
    help="Group identifier, e.g. org.example",
)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite existing files",
)
def init(
    name: str | None,
    modules: tuple[str, ...],
    version: str,
    group: str | None,
    force: bool,
) -> None:
    """Scaffold a web distribution project.

    Examples:

        wardist init

        wardist init --name shop --module catalog --module checkout

        wardist init --force
    """
    if name is None:
        name = Path.cwd().name
    module_names = list(dict.fromkeys(modules)) or list(DEFAULT_MODULES)

    for candidate in [name, *module_names]:
        if not _NAME_RE.match(candidate):
            error(f"Invalid name: {candidate}")
            error("Names start with a letter and contain letters, digits, '.', '-' or '_'.")
            raise SystemExit(1)

    build_file = Path("wardist.yaml")
    existed = build_file.exists()
    if existed and not force:
        error("wardist.yaml already exists.")
        error("Use --force to overwrite.")
        raise SystemExit(1)

    from jinja2.sandbox import SandboxedEnvironment

    env = SandboxedEnvironment(trim_blocks=True, lstrip_blocks=True)
    context = {"name": name, "version": version, "group": group, "modules": module_names}

    try:
        build_file.write_text(env.from_string(BUILD_FILE_TEMPLATE).render(**context))

        for module in module_names:
            webapp = Path(module) / "src" / "main" / "webapp"
            (webapp / "WEB-INF").mkdir(parents=True, exist_ok=True)
            files = {
                webapp / "index.html": INDEX_TEMPLATE,
                webapp / "WEB-INF" / "web.xml": WEB_XML_TEMPLATE,
            }
            for path, template in files.items():
                if path.exists() and not force:
                    continue
                path.write_text(env.from_string(template).render(module=module, **context))

    except PermissionError:
        error("Cannot write to current directory.")
        raise SystemExit(2) from None

    if existed:
        warning("Overwrote existing wardist.yaml")

    success(f"Created project: {name} ({', '.join(module_names)})")
