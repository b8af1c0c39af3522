from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="truecss", help="Run stylesheet assertion suites")
schema_app = typer.Typer(name="schema", help="Generate schema tooling")
app.add_typer(schema_app, name="schema")

EXAMPLE_SUITE = """\
settings:
  terminal_output: true

modules:
  - name: Math
    tests:
      - name: adds numbers
        assertions:
          - assert_equal:
              actual: 5
              expected: 5
              description: basic add
          - assert_true:
              value: [0]
  - name: Output
    tests:
      - name: emits color
        assertions:
          - assert_css:
              description: red text
              output:
                - "color: red"
              expect:
                - "color: red"
          - assert_css:
              output:
                - "color: red"
                - "margin: 0"
              contains_string: "color: red;"
"""


@app.command()
def run(
    suite: str = typer.Argument(help="Path to suite YAML file"),
    output_dir: str = typer.Option("runs", help="Output directory for run results"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run a suite and write output.css, junit.xml and meta.yaml."""
    from pydantic import ValidationError

    from truecss.config import load_suite
    from truecss.errors import AssertionUsageError, EngineError
    from truecss.runner import SuiteRunner

    suite_path = Path(suite)
    if not suite_path.exists():
        typer.echo(f"Error: suite file not found: {suite}", err=True)
        raise typer.Exit(2)

    try:
        suite_config = load_suite(suite_path)
    except (ValidationError, ValueError) as e:
        typer.echo(f"Error: invalid suite: {e}", err=True)
        raise typer.Exit(2)

    runner = SuiteRunner(
        suite=suite_config, output_dir=Path(output_dir), verbose=verbose
    )

    try:
        run_dir = runner.execute()
    except AssertionUsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        raise typer.Exit(2)
    except EngineError as e:
        typer.echo(f"Engine error: {e}", err=True)
        raise typer.Exit(2)

    typer.echo(f"Run complete: {run_dir}")
    typer.echo(f"Output: {run_dir / 'output.css'}")
    if not verbose:
        typer.echo(f"Debug log: {run_dir / 'debug.log'}")

    failed = runner.failed_tests
    if failed:
        typer.echo(f"{failed} test(s) failed", err=True)
        raise typer.Exit(1)


@app.command()
def init(
    dir: str = typer.Option("truecss", "--dir", help="Directory to write the suite in"),
):
    """Initialize a project with an example suite."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "suite.yaml"
    if example.exists():
        typer.echo(f"suite.yaml already exists in {dir}, skipping.")
        return

    example.write_text(EXAMPLE_SUITE)
    typer.echo(f"Initialized suite in {dir}:")
    typer.echo("  suite.yaml  - example assertion suite")


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "truecss/schemas/truecss.schema.json", help="Output path for JSON Schema"
    ),
):
    """Generate JSON Schema for the suite YAML format."""
    from truecss.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
