import dataclasses

from solrcursor.exceptions import MalformedResponse


def bind_document(model, doc):
    """
    Build a typed record from a raw Solr document.

    :param model [Callable]: target type. Dataclasses only receive their declared
        fields; any other callable receives the whole document as keyword arguments.
        With ``None`` the raw document is returned.
    :param doc [Dict[str, Any]]: the raw document.
    """
    if model is None:
        return doc

    if dataclasses.is_dataclass(model):
        names = {field.name for field in dataclasses.fields(model)}
        doc = {key: value for key, value in doc.items() if key in names}

    try:
        return model(**doc)
    except TypeError as exc:
        raise MalformedResponse(f'Cannot bind document to {model.__name__}: {exc}') from exc
