"""Post handlers — one module-level function per action."""

POSTS: dict[int, dict] = {}


def index(request):
    return list(POSTS.values())


def show(request, id):
    return POSTS[int(id)]


def create(request):
    post_id = len(POSTS) + 1
    POSTS[post_id] = {"id": post_id, **request.json}
    return POSTS[post_id]


def update(request, id):
    POSTS[int(id)].update(request.json)
    return POSTS[int(id)]


def destroy(request, id):
    return POSTS.pop(int(id))
