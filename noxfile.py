import os
import subprocess

with __import__("contextlib").suppress(ModuleNotFoundError):

    import nox  # isort:skip

    CI = "GITHUB_ACTION" in os.environ

    @nox.session(python=False, reuse_venv=not CI)
    def build(session):
        if CI:
            session.install(*"--upgrade pip wheel flit".split())
        env = dict(
            SOURCE_DATE_EPOCH=subprocess.check_output("git log -1 --format=%ct".split())
            .decode("utf-8")
            .strip()
        )
        session.run(*"flit build".split(), env=env)

    @nox.session(python=False, reuse_venv=not CI)
    def test(session):
        if CI:
            session.install(*"--ignore-installed --upgrade .[test]".split())
        session.run(*"coverage run -m pytest".split())
        session.run(*"coverage report".split())

    @nox.session(python=False)
    def develop(session):
        try:
            import flit
        except ModuleNotFoundError:
            session.install("flit")
        session.run(*"flit install -s".split())
