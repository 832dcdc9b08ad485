import attr


@attr.s(frozen=True)
class Expression:
    """A runner expression such as ``github.ref == 'refs/heads/main'``.

    ``str()`` wraps it for use inside values (``${{ github.ref }}``); ``if``
    fields take the bare ``raw`` text.
    """

    raw = attr.ib(validator=attr.validators.instance_of(str))

    def __str__(self):
        return '${{{{ {} }}}}'.format(self.raw)

    def and_(self, other):
        return Expression('({}) && ({})'.format(self.raw, raw(other)))

    def or_(self, other):
        return Expression('({}) || ({})'.format(self.raw, raw(other)))

    def not_(self):
        return Expression('!({})'.format(self.raw))


def raw(value):
    if isinstance(value, Expression):
        return value.raw

    return value


def literal(value):
    return "'{}'".format(value.replace("'", "''"))


class _Context:
    prefix = None

    def get(self, name):
        return Expression('{}.{}'.format(self.prefix, name))

    def __getitem__(self, name):
        return self.get(name)


class GitHubContext(_Context):
    prefix = 'github'

    ref = property(lambda self: self.get('ref'))
    ref_name = property(lambda self: self.get('ref_name'))
    ref_type = property(lambda self: self.get('ref_type'))
    sha = property(lambda self: self.get('sha'))
    actor = property(lambda self: self.get('actor'))
    repository = property(lambda self: self.get('repository'))
    repository_owner = property(lambda self: self.get('repository_owner'))
    event_name = property(lambda self: self.get('event_name'))
    workspace = property(lambda self: self.get('workspace'))
    run_id = property(lambda self: self.get('run_id'))
    run_number = property(lambda self: self.get('run_number'))
    run_attempt = property(lambda self: self.get('run_attempt'))
    job = property(lambda self: self.get('job'))
    token = property(lambda self: self.get('token'))
    server_url = property(lambda self: self.get('server_url'))
    api_url = property(lambda self: self.get('api_url'))
    graphql_url = property(lambda self: self.get('graphql_url'))
    head_ref = property(lambda self: self.get('head_ref'))
    base_ref = property(lambda self: self.get('base_ref'))

    def event(self, path):
        return self.get('event.{}'.format(path))


class RunnerContext(_Context):
    prefix = 'runner'

    os = property(lambda self: self.get('os'))
    arch = property(lambda self: self.get('arch'))
    name = property(lambda self: self.get('name'))
    temp = property(lambda self: self.get('temp'))
    tool_cache = property(lambda self: self.get('tool_cache'))


class SecretsContext(_Context):
    prefix = 'secrets'

    GITHUB_TOKEN = property(lambda self: self.get('GITHUB_TOKEN'))


class MatrixContext(_Context):
    prefix = 'matrix'


class InputsContext(_Context):
    prefix = 'inputs'


class VarsContext(_Context):
    prefix = 'vars'


class EnvContext(_Context):
    prefix = 'env'


class StepsContext:
    def output(self, step_id, name):
        return Expression('steps.{}.outputs.{}'.format(step_id, name))

    def outcome(self, step_id):
        return Expression('steps.{}.outcome'.format(step_id))

    def conclusion(self, step_id):
        return Expression('steps.{}.conclusion'.format(step_id))


class NeedsContext:
    def output(self, job_key, name):
        return Expression('needs.{}.outputs.{}'.format(job_key, name))

    def result(self, job_key):
        return Expression('needs.{}.result'.format(job_key))


github = GitHubContext()
runner = RunnerContext()
secrets = SecretsContext()
matrix = MatrixContext()
inputs = InputsContext()
vars = VarsContext()
env = EnvContext()
steps = StepsContext()
needs = NeedsContext()


def always():
    return Expression('always()')


def success():
    return Expression('success()')


def failure():
    return Expression('failure()')


def cancelled():
    return Expression('cancelled()')


def branch(name):
    return Expression("github.ref == 'refs/heads/{}'".format(name))


def tag(name):
    return Expression("github.ref == 'refs/tags/{}'".format(name))


def tag_prefix(prefix):
    return Expression("startsWith(github.ref, 'refs/tags/{}')".format(prefix))


def is_push():
    return Expression("github.event_name == 'push'")


def is_pull_request():
    return Expression("github.event_name == 'pull_request'")


def is_release():
    return Expression("github.event_name == 'release'")


def is_tag():
    return Expression("startsWith(github.ref, 'refs/tags/')")


def on_default_branch():
    return Expression(
        "github.ref == format('refs/heads/{0}',"
        " github.event.repository.default_branch)",
    )


def previous_job_succeeded(job_key):
    return Expression("{} == 'success'".format(needs.result(job_key).raw))


def previous_job_failed(job_key):
    return Expression("{} == 'failure'".format(needs.result(job_key).raw))


def _call(function, *arguments):
    return Expression('{}({})'.format(
        function,
        ', '.join(raw(argument) for argument in arguments),
    ))


def contains(haystack, needle):
    return _call('contains', haystack, needle)


def starts_with(value, prefix):
    return _call('startsWith', value, prefix)


def ends_with(value, suffix):
    return _call('endsWith', value, suffix)


def format_(template, *arguments):
    return _call('format', literal(template), *arguments)


def join(array, separator):
    return _call('join', array, literal(separator))


def to_json(value):
    return _call('toJSON', value)


def from_json(value):
    return _call('fromJSON', value)
