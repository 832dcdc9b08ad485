import attr
import marshmallow

import wetwire.contract


class KustomizeSchema(wetwire.contract.InputsSchema):
    kustomization = marshmallow.fields.String()


@attr.s(frozen=True)
class Kustomize(wetwire.contract.Action):
    action_reference = 'stefanprodan/kustomize-action@master'
    inputs_schema = KustomizeSchema

    kustomization = attr.ib(default='')
