import attr
import marshmallow

import wetwire.contract


class K8sSetContextSchema(wetwire.contract.InputsSchema):
    method = marshmallow.fields.String()
    kubeconfig = marshmallow.fields.String()
    context = marshmallow.fields.String()
    cluster_type = marshmallow.fields.String(data_key='cluster-type')
    resource_group = marshmallow.fields.String(data_key='resource-group')
    cluster_name = marshmallow.fields.String(data_key='cluster-name')


@attr.s(frozen=True)
class K8sSetContext(wetwire.contract.Action):
    action_reference = 'azure/k8s-set-context@v4'
    inputs_schema = K8sSetContextSchema

    method = attr.ib(default='')
    kubeconfig = attr.ib(default='')
    context = attr.ib(default='')
    cluster_type = attr.ib(default='')
    resource_group = attr.ib(default='')
    cluster_name = attr.ib(default='')
