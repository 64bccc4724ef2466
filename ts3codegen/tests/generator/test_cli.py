"""Tests for CLI interface."""

import json
import os
import tempfile

from click.testing import CliRunner

from ts3codegen.generator.cli import cli

FILE_DIR = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))


def describe_gen_command():
    def generates_python_code(expect):
        runner = CliRunner()
        with tempfile.NamedTemporaryFile(suffix=".py", delete=False) as f:
            output_file = f.name

        try:
            result = runner.invoke(
                cli,
                ["gen", "-i", f"{FILE_DIR}/messages.tsdecl", "-o", output_file],
            )
            expect(result.exit_code) == 0
            with open(output_file) as f:
                content = f.read()
            expect("class ClientEnterView(Message)" in content) == True
            expect("from ts3_runtime.serialization import" in content) == True
        finally:
            os.unlink(output_file)

    def uses_package_runtime_without_value(expect):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            output_file = os.path.join(tmpdir, "messages.py")
            result = runner.invoke(
                cli,
                [
                    "gen",
                    "-i",
                    f"{FILE_DIR}/messages.tsdecl",
                    "-o",
                    output_file,
                    "--runtime-import",
                ],
            )
            expect(result.exit_code) == 0
            with open(output_file) as f:
                content = f.read()
            expect("from ts3codegen.proto import codecs as _c" in content) == True

    def fails_with_invalid_declarations(expect):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            input_file = os.path.join(tmpdir, "broken.tsdecl")
            with open(input_file, "w") as f:
                f.write('message A "a" { missing }\n')

            result = runner.invoke(
                cli, ["gen", "-i", input_file, "-o", os.path.join(tmpdir, "out.py")]
            )
            expect(result.exit_code) != 0
            expect(os.path.exists(os.path.join(tmpdir, "out.py"))) == False

    def fails_with_missing_input(expect):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["gen", "-i", "/nonexistent/file.tsdecl", "-o", "/tmp/out.py"],
        )
        expect(result.exit_code) != 0

    def requires_all_options(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["gen", "-i", f"{FILE_DIR}/messages.tsdecl"])
        expect(result.exit_code) != 0
        expect("Missing option" in result.output) == True


def describe_runtime_command():
    def generates_python_runtime(expect):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(cli, ["runtime", "-o", tmpdir])
            expect(result.exit_code) == 0
            # Check that the runtime folder was created with expected files
            runtime_dir = os.path.join(tmpdir, "ts3_runtime")
            expect(os.path.isdir(runtime_dir)) == True
            expect(os.path.isfile(os.path.join(runtime_dir, "__init__.py"))) == True
            expect(os.path.isfile(os.path.join(runtime_dir, "codecs.py"))) == True
            expect(os.path.isfile(os.path.join(runtime_dir, "runtime.py"))) == True

    def uses_custom_name(expect):
        runner = CliRunner()
        with tempfile.TemporaryDirectory() as tmpdir:
            result = runner.invoke(cli, ["runtime", "-o", tmpdir, "--name", "tsrt"])
            expect(result.exit_code) == 0
            expect(os.path.isdir(os.path.join(tmpdir, "tsrt"))) == True


def describe_info_command():
    def prints_tables(expect, messages_decl):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-i", messages_decl])
        expect(result.exit_code) == 0
        expect("Messages" in result.output) == True
        expect("Fields" in result.output) == True
        expect("clid" in result.output) == True

    def prints_json(expect, messages_decl):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-i", messages_decl, "--json"])
        expect(result.exit_code) == 0

        data = json.loads(result.output)
        expect(data["notifications"]["error"]) == "Error"
        expect(data["messages"]["ClientMove"]["response"]) == True
        expect(data["messages"]["ClientMove"]["variant"]) == None
        expect(data["fields"]["client_ids"]["type"]) == "list[ClientId]"


def describe_main_group():
    def shows_help(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        expect(result.exit_code) == 0
        expect("gen" in result.output) == True
        expect("runtime" in result.output) == True
        expect("info" in result.output) == True
