import collections
import typing

import attr
import marshmallow
import marshmallow_polyfield
import pyrsistent.typing

from pyrsistent import pvector, pmap

import wetwire.contract
import wetwire.expressions
import wetwire.utils


def optional(validator):
    return attr.validators.optional(validator)


def freeze_axes(values):
    return pmap({
        axis: pvector(value) if isinstance(value, (list, tuple)) else value
        for axis, value in values.items()
    })


def freeze_overlays(overlays):
    return pvector(pmap(overlay) for overlay in overlays)


def freeze_labels(value):
    if isinstance(value, (str, wetwire.expressions.Expression)):
        return value

    return pvector(value)


class ScheduleSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    cron = marshmallow.fields.String()


@attr.s(frozen=True)
class Schedule:
    cron = attr.ib(validator=attr.validators.instance_of(str))


class PushSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    branches = marshmallow.fields.List(marshmallow.fields.String())
    branches_ignore = marshmallow.fields.List(
        marshmallow.fields.String(),
        data_key='branches-ignore',
    )
    tags = marshmallow.fields.List(marshmallow.fields.String())
    tags_ignore = marshmallow.fields.List(
        marshmallow.fields.String(),
        data_key='tags-ignore',
    )
    paths = marshmallow.fields.List(marshmallow.fields.String())
    paths_ignore = marshmallow.fields.List(
        marshmallow.fields.String(),
        data_key='paths-ignore',
    )

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Push:
    branches = attr.ib(default=(), converter=pvector)
    branches_ignore = attr.ib(default=(), converter=pvector)
    tags = attr.ib(default=(), converter=pvector)
    tags_ignore = attr.ib(default=(), converter=pvector)
    paths = attr.ib(default=(), converter=pvector)
    paths_ignore = attr.ib(default=(), converter=pvector)


class PullRequestSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    types = marshmallow.fields.List(marshmallow.fields.String())
    branches = marshmallow.fields.List(marshmallow.fields.String())
    branches_ignore = marshmallow.fields.List(
        marshmallow.fields.String(),
        data_key='branches-ignore',
    )
    paths = marshmallow.fields.List(marshmallow.fields.String())
    paths_ignore = marshmallow.fields.List(
        marshmallow.fields.String(),
        data_key='paths-ignore',
    )

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class PullRequest:
    types = attr.ib(default=(), converter=pvector)
    branches = attr.ib(default=(), converter=pvector)
    branches_ignore = attr.ib(default=(), converter=pvector)
    paths = attr.ib(default=(), converter=pvector)
    paths_ignore = attr.ib(default=(), converter=pvector)


@attr.s(frozen=True)
class PullRequestTarget(PullRequest):
    pass


class WorkflowInputSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    description = marshmallow.fields.String()
    required = marshmallow.fields.Boolean()
    default = wetwire.utils.Value(metadata={'explicit': True})
    type = marshmallow.fields.String()
    options = marshmallow.fields.List(marshmallow.fields.String())

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class WorkflowInput:
    description = attr.ib(default='')
    required = attr.ib(default=False)
    default = attr.ib(default=None)
    type = attr.ib(default='')
    options = attr.ib(default=(), converter=pvector)


class WorkflowDispatchSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    inputs = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=marshmallow.fields.Nested(WorkflowInputSchema()),
    )

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class WorkflowDispatch:
    inputs: typing.Mapping[str, WorkflowInput] = attr.ib(
        default=pmap(),
        converter=pmap,
    )


class WorkflowOutputSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    description = marshmallow.fields.String()
    value = wetwire.utils.Value()

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class WorkflowOutput:
    value = attr.ib()
    description = attr.ib(default='')


class WorkflowSecretSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    description = marshmallow.fields.String()
    required = marshmallow.fields.Boolean()

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class WorkflowSecret:
    description = attr.ib(default='')
    required = attr.ib(default=False)


class WorkflowCallSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    inputs = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=marshmallow.fields.Nested(WorkflowInputSchema()),
    )
    outputs = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=marshmallow.fields.Nested(WorkflowOutputSchema()),
    )
    secrets = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=marshmallow.fields.Nested(WorkflowSecretSchema()),
    )

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class WorkflowCall:
    inputs = attr.ib(default=pmap(), converter=pmap)
    outputs = attr.ib(default=pmap(), converter=pmap)
    secrets = attr.ib(default=pmap(), converter=pmap)


class WorkflowRunSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    workflows = marshmallow.fields.List(marshmallow.fields.String())
    types = marshmallow.fields.List(marshmallow.fields.String())
    branches = marshmallow.fields.List(marshmallow.fields.String())
    branches_ignore = marshmallow.fields.List(
        marshmallow.fields.String(),
        data_key='branches-ignore',
    )

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class WorkflowRun:
    workflows = attr.ib(default=(), converter=pvector)
    types = attr.ib(default=(), converter=pvector)
    branches = attr.ib(default=(), converter=pvector)
    branches_ignore = attr.ib(default=(), converter=pvector)


class EventSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    types = marshmallow.fields.List(marshmallow.fields.String())

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Event:
    """Any other triggering event, optionally narrowed to activity types."""

    types = attr.ib(default=(), converter=pvector)


def present_trigger(schema):
    return marshmallow.fields.Nested(schema, metadata={'explicit': True})


class TriggersSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    push = present_trigger(PushSchema())
    pull_request = present_trigger(PullRequestSchema())
    pull_request_target = present_trigger(PullRequestSchema())
    schedule = marshmallow.fields.List(
        marshmallow.fields.Nested(ScheduleSchema()),
    )
    workflow_dispatch = present_trigger(WorkflowDispatchSchema())
    workflow_call = present_trigger(WorkflowCallSchema())
    workflow_run = present_trigger(WorkflowRunSchema())
    repository_dispatch = present_trigger(EventSchema())
    check_run = present_trigger(EventSchema())
    check_suite = present_trigger(EventSchema())
    create = present_trigger(EventSchema())
    delete = present_trigger(EventSchema())
    discussion = present_trigger(EventSchema())
    discussion_comment = present_trigger(EventSchema())
    fork = present_trigger(EventSchema())
    gollum = present_trigger(EventSchema())
    issue_comment = present_trigger(EventSchema())
    issues = present_trigger(EventSchema())
    label = present_trigger(EventSchema())
    merge_group = present_trigger(EventSchema())
    milestone = present_trigger(EventSchema())
    page_build = present_trigger(EventSchema())
    project = present_trigger(EventSchema())
    project_card = present_trigger(EventSchema())
    project_column = present_trigger(EventSchema())
    public = present_trigger(EventSchema())
    pull_request_review = present_trigger(EventSchema())
    pull_request_review_comment = present_trigger(EventSchema())
    release = present_trigger(EventSchema())
    status = present_trigger(EventSchema())
    watch = present_trigger(EventSchema())

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Triggers:
    push = attr.ib(default=None)
    pull_request = attr.ib(default=None)
    pull_request_target = attr.ib(default=None)
    schedule: pyrsistent.typing.PVector[Schedule] = attr.ib(
        default=(),
        converter=pvector,
    )
    workflow_dispatch = attr.ib(default=None)
    workflow_call = attr.ib(default=None)
    workflow_run = attr.ib(default=None)
    repository_dispatch = attr.ib(default=None)
    check_run = attr.ib(default=None)
    check_suite = attr.ib(default=None)
    create = attr.ib(default=None)
    delete = attr.ib(default=None)
    discussion = attr.ib(default=None)
    discussion_comment = attr.ib(default=None)
    fork = attr.ib(default=None)
    gollum = attr.ib(default=None)
    issue_comment = attr.ib(default=None)
    issues = attr.ib(default=None)
    label = attr.ib(default=None)
    merge_group = attr.ib(default=None)
    milestone = attr.ib(default=None)
    page_build = attr.ib(default=None)
    project = attr.ib(default=None)
    project_card = attr.ib(default=None)
    project_column = attr.ib(default=None)
    public = attr.ib(default=None)
    pull_request_review = attr.ib(default=None)
    pull_request_review_comment = attr.ib(default=None)
    release = attr.ib(default=None)
    status = attr.ib(default=None)
    watch = attr.ib(default=None)

    def present(self):
        return [
            field.name
            for field in attr.fields(type(self))
            if not wetwire.utils.is_unset(getattr(self, field.name))
        ]


class MatrixSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    values = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=wetwire.utils.Value(),
    )
    include = marshmallow.fields.List(
        wetwire.utils.SortedDict(
            keys=marshmallow.fields.String(),
            values=wetwire.utils.Value(),
        ),
    )
    exclude = marshmallow.fields.List(
        wetwire.utils.SortedDict(
            keys=marshmallow.fields.String(),
            values=wetwire.utils.Value(),
        ),
    )

    @marshmallow.decorators.post_dump
    def post_dump(self, data, many, **kwargs):
        # axes sit inline beside include and exclude
        processed = collections.OrderedDict(data.pop('values', None) or ())
        processed.update(data)

        return wetwire.utils.remove_unset_values(self, processed)


@attr.s(frozen=True)
class Matrix:
    values = attr.ib(default=pmap(), converter=freeze_axes)
    include = attr.ib(default=(), converter=freeze_overlays)
    exclude = attr.ib(default=(), converter=freeze_overlays)


class StrategySchema(marshmallow.Schema):
    class Meta:
        ordered = True

    matrix = marshmallow.fields.Nested(MatrixSchema())
    fail_fast = marshmallow.fields.Boolean(
        data_key='fail-fast',
        allow_none=True,
        metadata={'explicit': True},
    )
    max_parallel = marshmallow.fields.Integer(data_key='max-parallel')

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Strategy:
    matrix = attr.ib(default=None)
    fail_fast = attr.ib(
        default=None,
        validator=optional(attr.validators.instance_of(bool)),
    )
    max_parallel = attr.ib(
        default=None,
        validator=optional(attr.validators.instance_of(int)),
    )


@attr.s(frozen=True)
class Environment:
    name = attr.ib(validator=attr.validators.instance_of(str))
    url = attr.ib(default='')


def dump_environment(environment):
    if environment is None or isinstance(environment, str):
        return environment

    if wetwire.utils.is_unset(environment.url):
        return environment.name

    return collections.OrderedDict([
        ('name', environment.name),
        ('url', wetwire.utils.serialize_value(environment.url)),
    ])


class ConcurrencySchema(marshmallow.Schema):
    class Meta:
        ordered = True

    group = wetwire.utils.Value()
    cancel_in_progress = wetwire.utils.Value(data_key='cancel-in-progress')

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Concurrency:
    group = attr.ib()
    cancel_in_progress = attr.ib(default=False)


def dump_concurrency(concurrency):
    if concurrency is None or isinstance(concurrency, str):
        return concurrency

    return ConcurrencySchema().dump(concurrency)


read = 'read'
write = 'write'
none = 'none'


class PermissionsSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    actions = marshmallow.fields.String()
    attestations = marshmallow.fields.String()
    checks = marshmallow.fields.String()
    contents = marshmallow.fields.String()
    deployments = marshmallow.fields.String()
    discussions = marshmallow.fields.String()
    id_token = marshmallow.fields.String(data_key='id-token')
    issues = marshmallow.fields.String()
    packages = marshmallow.fields.String()
    pages = marshmallow.fields.String()
    pull_requests = marshmallow.fields.String(data_key='pull-requests')
    repository_projects = marshmallow.fields.String(
        data_key='repository-projects',
    )
    security_events = marshmallow.fields.String(data_key='security-events')
    statuses = marshmallow.fields.String()

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Permissions:
    actions = attr.ib(default='')
    attestations = attr.ib(default='')
    checks = attr.ib(default='')
    contents = attr.ib(default='')
    deployments = attr.ib(default='')
    discussions = attr.ib(default='')
    id_token = attr.ib(default='')
    issues = attr.ib(default='')
    packages = attr.ib(default='')
    pages = attr.ib(default='')
    pull_requests = attr.ib(default='')
    repository_projects = attr.ib(default='')
    security_events = attr.ib(default='')
    statuses = attr.ib(default='')


def dump_permissions(permissions):
    if permissions is None or isinstance(permissions, str):
        return permissions

    # an empty permissions block revokes everything, so keep it
    return PermissionsSchema().dump(permissions)


class RunDefaultsSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    shell = marshmallow.fields.String()
    working_directory = marshmallow.fields.String(
        data_key='working-directory',
    )

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class RunDefaults:
    shell = attr.ib(default='')
    working_directory = attr.ib(default='')


class DefaultsSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    run = marshmallow.fields.Nested(RunDefaultsSchema())

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Defaults:
    run = attr.ib(default=None)


class CredentialsSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    username = wetwire.utils.Value()
    password = wetwire.utils.Value()

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Credentials:
    username = attr.ib()
    password = attr.ib()


class ContainerSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    image = wetwire.utils.Value()
    credentials = marshmallow.fields.Nested(CredentialsSchema())
    env = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=wetwire.utils.Value(),
    )
    ports = marshmallow.fields.List(wetwire.utils.Value())
    volumes = marshmallow.fields.List(marshmallow.fields.String())
    options = marshmallow.fields.String()

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Container:
    image = attr.ib()
    credentials = attr.ib(default=None)
    env = attr.ib(default=pmap(), converter=pmap)
    ports = attr.ib(default=(), converter=pvector)
    volumes = attr.ib(default=(), converter=pvector)
    options = attr.ib(default='')


class StepSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    id = marshmallow.fields.String()
    name = marshmallow.fields.String()
    if_ = wetwire.utils.Condition(data_key='if')
    uses = marshmallow.fields.String()
    with_ = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=wetwire.utils.Value(),
        data_key='with',
    )
    run = marshmallow.fields.String()
    env = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=wetwire.utils.Value(),
    )
    working_directory = marshmallow.fields.String(
        data_key='working-directory',
    )
    shell = marshmallow.fields.String()
    continue_on_error = wetwire.utils.Value(data_key='continue-on-error')
    timeout_minutes = wetwire.utils.Integer(data_key='timeout-minutes')

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Step:
    uses = attr.ib(default=None)
    with_: typing.Mapping[str, typing.Any] = attr.ib(
        default=pmap(),
        converter=pmap,
    )
    run = attr.ib(default=None)
    id = attr.ib(default=None)
    name = attr.ib(default=None)
    if_ = attr.ib(default=None)
    env: typing.Mapping[str, typing.Any] = attr.ib(
        default=pmap(),
        converter=pmap,
    )
    working_directory = attr.ib(default=None)
    shell = attr.ib(default=None)
    continue_on_error = attr.ib(default=False)
    timeout_minutes = attr.ib(
        default=None,
        validator=optional(attr.validators.instance_of(
            (int, wetwire.expressions.Expression),
        )),
    )

    def output(self, name):
        if wetwire.utils.is_unset(self.id):
            raise ValueError(
                'Step outputs can only be referenced on steps with an id',
            )

        return wetwire.expressions.steps.output(self.id, name)


def to_step(action, **kwargs):
    return Step(uses=action.reference(), with_=action.inputs(), **kwargs)


class ActionStepSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    uses = marshmallow.fields.Method('dump_uses')
    with_ = marshmallow.fields.Method('dump_with', data_key='with')

    def dump_uses(self, action):
        return action.reference()

    def dump_with(self, action):
        return wetwire.utils.sorted_ordered_dict({
            key: wetwire.utils.serialize_value(value)
            for key, value in action.inputs().items()
        })

    post_dump = wetwire.utils.post_dump_remove_unset_values


def job_steps_serialization_schema_selector(base_object, parent_object):
    if isinstance(base_object, Step):
        return StepSchema()

    if wetwire.contract.is_step_action(base_object):
        return ActionStepSchema()

    raise TypeError('Unexpected step type: {!r}'.format(type(base_object)))


class JobSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    name = marshmallow.fields.String()
    runs_on = wetwire.utils.StringOrList(data_key='runs-on')
    needs = marshmallow.fields.List(marshmallow.fields.String())
    if_ = wetwire.utils.Condition(data_key='if')
    timeout_minutes = wetwire.utils.Integer(data_key='timeout-minutes')
    continue_on_error = wetwire.utils.Value(data_key='continue-on-error')
    strategy = marshmallow.fields.Nested(StrategySchema())
    environment = marshmallow.fields.Function(
        lambda job: dump_environment(job.environment),
    )
    concurrency = marshmallow.fields.Function(
        lambda job: dump_concurrency(job.concurrency),
    )
    permissions = marshmallow.fields.Function(
        lambda job: dump_permissions(job.permissions),
        metadata={'explicit': True},
    )
    outputs = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=wetwire.utils.Value(),
    )
    env = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=wetwire.utils.Value(),
    )
    defaults = marshmallow.fields.Nested(DefaultsSchema())
    container = marshmallow.fields.Nested(ContainerSchema())
    services = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=marshmallow.fields.Nested(ContainerSchema()),
    )
    steps = marshmallow.fields.List(
        marshmallow_polyfield.PolyField(
            serialization_schema_selector=(
                job_steps_serialization_schema_selector
            ),
        ),
    )

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Job:
    runs_on = attr.ib(converter=freeze_labels)
    steps: pyrsistent.typing.PVector[
        typing.Union[Step, wetwire.contract.StepAction],
    ] = attr.ib(default=(), converter=pvector)
    name = attr.ib(default=None)
    needs = attr.ib(default=(), converter=pvector)
    if_ = attr.ib(default=None)
    timeout_minutes = attr.ib(
        default=None,
        validator=optional(attr.validators.instance_of(
            (int, wetwire.expressions.Expression),
        )),
    )
    continue_on_error = attr.ib(default=False)
    strategy = attr.ib(default=None)
    environment = attr.ib(default=None)
    concurrency = attr.ib(default=None)
    permissions = attr.ib(default=None)
    outputs = attr.ib(default=pmap(), converter=pmap)
    env = attr.ib(default=pmap(), converter=pmap)
    defaults = attr.ib(default=None)
    container = attr.ib(default=None)
    services = attr.ib(default=pmap(), converter=pmap)


class WorkflowSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    name = marshmallow.fields.String()
    on = marshmallow.fields.Nested(TriggersSchema())
    permissions = marshmallow.fields.Function(
        lambda workflow: dump_permissions(workflow.permissions),
        metadata={'explicit': True},
    )
    concurrency = marshmallow.fields.Function(
        lambda workflow: dump_concurrency(workflow.concurrency),
    )
    env = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=wetwire.utils.Value(),
    )
    defaults = marshmallow.fields.Nested(DefaultsSchema())
    jobs = wetwire.utils.SortedDict(
        keys=marshmallow.fields.String(),
        values=marshmallow.fields.Nested(JobSchema()),
    )

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Workflow:
    on = attr.ib(validator=attr.validators.instance_of(Triggers))
    jobs: typing.Mapping[str, Job] = attr.ib(default=pmap(), converter=pmap)
    name = attr.ib(default=None)
    permissions = attr.ib(default=None)
    concurrency = attr.ib(default=None)
    env = attr.ib(default=pmap(), converter=pmap)
    defaults = attr.ib(default=None)
