from flask import request, url_for
from werkzeug.exceptions import BadRequest

from film_catalog.errors import InvalidJson, TypeMismatch


def request_json():
    try:
        return request.get_json()
    except BadRequest as err:
        raise InvalidJson("Malformed request body. Check the JSON syntax.") from err


def path_id(value, parameter):
    """Parse an id taken from the URL path."""
    try:
        return int(value)
    except ValueError as err:
        raise TypeMismatch(parameter, value) from err


def page_link(page, number):
    # keep the filters of the current request, override paging and sort
    args = request.args.to_dict(flat=False)
    args.update(
        page=number,
        size=page.size,
        sortBy=page.request.sort_by,
        sortDir=page.request.sort_dir
    )
    return url_for(request.endpoint, **args)


def page_to_hateoas(page, items):
    last_page = max(page.total_pages - 1, 0)

    links = {
        "self": page_link(page, page.page),
        "first": page_link(page, 0),
        "last": page_link(page, last_page)
    }
    if page.has_previous:
        links["prev"] = page_link(page, page.page - 1)
    if page.has_next:
        links["next"] = page_link(page, page.page + 1)

    return {
        "items": items,
        "page": page.page,
        "size": page.size,
        "totalElements": page.total_elements,
        "totalPages": page.total_pages,
        "_links": links
    }
