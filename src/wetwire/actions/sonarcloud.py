import attr
import marshmallow

import wetwire.contract


class SonarCloudSchema(wetwire.contract.InputsSchema):
    project_base_dir = marshmallow.fields.String(data_key='projectBaseDir')
    args = marshmallow.fields.String()


@attr.s(frozen=True)
class SonarCloud(wetwire.contract.Action):
    action_reference = 'SonarSource/sonarcloud-github-action@v3'
    inputs_schema = SonarCloudSchema

    project_base_dir = attr.ib(default='')
    args = attr.ib(default='')
