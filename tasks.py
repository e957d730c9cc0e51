from invoke import Collection, task
from invoke.exceptions import Exit

from aocnew import scaffold
from aocnew.config import DEFAULTS


@task
def newday(c, day):
    try:
        scaffold.newday(c, day)
    except scaffold.ScaffoldError as e:
        raise Exit(str(e), code=e.exit_code)


ns = Collection(newday)
ns.configure({"aocnew": dict(DEFAULTS)})
