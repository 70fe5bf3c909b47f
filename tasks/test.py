# type: ignore

from invoke import task, Collection

from .check import check_import


@task(check_import)
def pytest(ctx):
    """Run the unit tests with pytest."""
    ctx.run(f'pytest --cov={ctx.package} --cov-report=term-missing')


@task(pytest)
def all(ctx):
    """Run all test utilities."""
    pass


ns = Collection(pytest)
ns.add_task(all, default=True)
