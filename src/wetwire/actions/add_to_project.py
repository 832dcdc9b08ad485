import attr
import marshmallow

import wetwire.contract


class AddToProjectSchema(wetwire.contract.InputsSchema):
    project_url = marshmallow.fields.String(data_key='project-url')
    github_token = marshmallow.fields.String(data_key='github-token')
    labeled = marshmallow.fields.String()
    label_operator = marshmallow.fields.String(data_key='label-operator')


@attr.s(frozen=True)
class AddToProject(wetwire.contract.Action):
    action_reference = 'actions/add-to-project@v1'
    inputs_schema = AddToProjectSchema

    project_url = attr.ib(default='')
    github_token = attr.ib(default='')
    labeled = attr.ib(default='')
    label_operator = attr.ib(default='')
