import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class DockerBuildPushSchema(wetwire.contract.InputsSchema):
    context = marshmallow.fields.String()
    file = marshmallow.fields.String()
    push = wetwire.utils.Boolean()
    load = wetwire.utils.Boolean()
    tags = marshmallow.fields.String()
    build_args = marshmallow.fields.String(data_key='build-args')
    platforms = marshmallow.fields.String()
    cache_from = marshmallow.fields.String(data_key='cache-from')
    cache_to = marshmallow.fields.String(data_key='cache-to')
    target = marshmallow.fields.String()
    no_cache = wetwire.utils.Boolean(data_key='no-cache')
    pull = wetwire.utils.Boolean()
    secrets = marshmallow.fields.String()
    labels = marshmallow.fields.String()
    outputs = marshmallow.fields.String()
    provenance = marshmallow.fields.String()
    sbom = marshmallow.fields.String()


@attr.s(frozen=True)
class DockerBuildPush(wetwire.contract.Action):
    action_reference = 'docker/build-push-action@v6'
    inputs_schema = DockerBuildPushSchema

    context = attr.ib(default='')
    file = attr.ib(default='')
    push = attr.ib(default=False)
    load = attr.ib(default=False)
    tags = attr.ib(default='')
    build_args = attr.ib(default='')
    platforms = attr.ib(default='')
    cache_from = attr.ib(default='')
    cache_to = attr.ib(default='')
    target = attr.ib(default='')
    no_cache = attr.ib(default=False)
    pull = attr.ib(default=False)
    secrets = attr.ib(default='')
    labels = attr.ib(default='')
    outputs = attr.ib(default='')
    provenance = attr.ib(default='')
    sbom = attr.ib(default='')
