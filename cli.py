import click
import json
import os
from dataclasses import asdict

from pngme import __version__
from pngme.commands import decode, encode, print_chunks, remove
from pngme.errors import PngError
from pngme.logger import error

JSON_ENV = os.environ.get("PNGME_JSON", "0").lower() in ("1", "true")


def output_result(result, json_output: bool):
    if json_output:
        if not isinstance(result, (dict, list)):
            result = {"result": result}
        click.echo(json.dumps(result, ensure_ascii=False))
    else:
        if isinstance(result, (dict, list)):
            click.echo(json.dumps(result, ensure_ascii=False, indent=2))
        else:
            click.echo(result)


def run_command(fn, *args):
    """명령을 실행하고 오류를 사용자용 메시지로 변환합니다."""
    try:
        return fn(*args)
    except (PngError, OSError) as e:
        error(f"{fn.__name__} 실패: {e}")
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(__version__)
@click.option("--json", "json_output", is_flag=True, help="Return output in JSON format")
@click.pass_context
def cli(ctx, json_output):
    """Hide messages in PNG chunks."""
    ctx.obj = {"json": json_output or JSON_ENV}


@cli.command(name="encode")
@click.argument("file_path", type=click.Path(dir_okay=False))
@click.argument("chunk_type")
@click.argument("message")
@click.argument("output_file", required=False, type=click.Path(dir_okay=False))
@click.pass_obj
def encode_cmd(obj, file_path, chunk_type, message, output_file):
    """Append a message chunk to a PNG file."""
    path = run_command(encode, file_path, chunk_type, message, output_file)
    output_result({"chunk_type": chunk_type, "output_file": str(path)}, obj["json"])


@cli.command(name="decode")
@click.argument("file_path", type=click.Path(dir_okay=False))
@click.argument("chunk_type")
@click.pass_obj
def decode_cmd(obj, file_path, chunk_type):
    """Print the message stored in a chunk."""
    message = run_command(decode, file_path, chunk_type)
    output_result(message, obj["json"])


@cli.command(name="remove")
@click.argument("file_path", type=click.Path(dir_okay=False))
@click.argument("chunk_type")
@click.pass_obj
def remove_cmd(obj, file_path, chunk_type):
    """Remove every chunk of the given type."""
    removed = run_command(remove, file_path, chunk_type)
    if obj["json"]:
        output_result([{"chunk_type": str(c.chunk_type), "length": c.length, "crc": c.crc} for c in removed], True)
    else:
        for chunk in removed:
            click.echo(chunk)


@cli.command(name="print")
@click.argument("file_path", type=click.Path(dir_okay=False))
@click.pass_obj
def print_cmd(obj, file_path):
    """Print every chunk in a PNG file."""
    summaries = run_command(print_chunks, file_path)
    if obj["json"]:
        output_result([asdict(s) for s in summaries], True)
    else:
        for s in summaries:
            click.echo(f"{s.index:3d}  {s.chunk_type}  length={s.length}  crc={s.crc}")


if __name__ == "__main__":
    cli()
