import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class ScorecardSchema(wetwire.contract.InputsSchema):
    results_file = marshmallow.fields.String()
    results_format = marshmallow.fields.String()
    publish_results = wetwire.utils.Boolean()
    repo_token = marshmallow.fields.String()


@attr.s(frozen=True)
class Scorecard(wetwire.contract.Action):
    action_reference = 'ossf/scorecard-action@v2.4.0'
    inputs_schema = ScorecardSchema

    results_file = attr.ib(default='')
    results_format = attr.ib(default='')
    publish_results = attr.ib(default=False)
    repo_token = attr.ib(default='')
