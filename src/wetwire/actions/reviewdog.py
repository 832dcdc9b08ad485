import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class ReviewdogSchema(wetwire.contract.InputsSchema):
    reviewdog_version = marshmallow.fields.String()


@attr.s(frozen=True)
class Reviewdog(wetwire.contract.Action):
    action_reference = 'reviewdog/action-setup@v1'
    inputs_schema = ReviewdogSchema

    reviewdog_version = attr.ib(default='')


class ReviewdogReporterSchema(wetwire.contract.InputsSchema):
    github_token = marshmallow.fields.String()
    workdir = marshmallow.fields.String()
    reporter = marshmallow.fields.String()
    filter = marshmallow.fields.String()
    fail_on_error = wetwire.utils.Boolean()
    level = marshmallow.fields.String()
    reviewdog_flags = marshmallow.fields.String()
    name = marshmallow.fields.String()


@attr.s(frozen=True)
class ReviewdogReporter(wetwire.contract.Action):
    action_reference = 'reviewdog/action-reviewdog@v1'
    inputs_schema = ReviewdogReporterSchema

    github_token = attr.ib(default='')
    workdir = attr.ib(default='')
    reporter = attr.ib(default='')
    filter = attr.ib(default='')
    fail_on_error = attr.ib(default=False)
    level = attr.ib(default='')
    reviewdog_flags = attr.ib(default='')
    name = attr.ib(default='')
