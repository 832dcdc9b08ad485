import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class KindSchema(wetwire.contract.InputsSchema):
    version = marshmallow.fields.String()
    config = marshmallow.fields.String()
    cluster_name = marshmallow.fields.String()
    wait = marshmallow.fields.String()
    verbosity = wetwire.utils.Integer()
    kubeconfig = marshmallow.fields.String()
    registry = wetwire.utils.Boolean()
    kubectl_version = marshmallow.fields.String()
    install_only = wetwire.utils.Boolean()
    ignore_failed_clean = wetwire.utils.Boolean()


@attr.s(frozen=True)
class Kind(wetwire.contract.Action):
    action_reference = 'helm/kind-action@v1'
    inputs_schema = KindSchema

    version = attr.ib(default='')
    config = attr.ib(default='')
    cluster_name = attr.ib(default='')
    wait = attr.ib(default='')
    verbosity = attr.ib(default=0)
    kubeconfig = attr.ib(default='')
    registry = attr.ib(default=False)
    kubectl_version = attr.ib(default='')
    install_only = attr.ib(default=False)
    ignore_failed_clean = attr.ib(default=False)
