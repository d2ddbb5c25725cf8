"""Comment handlers, grouped on a controller exported as ``default``."""


class CommentsController:
    def __init__(self) -> None:
        self.comments: dict[int, list[str]] = {}

    def index(self, request, post_id):
        return self.comments.get(int(post_id), [])

    def create(self, request, post_id):
        self.comments.setdefault(int(post_id), []).append(request.json["body"])
        return self.comments[int(post_id)]

    def destroy(self, request, post_id, id):
        return self.comments[int(post_id)].pop(int(id))


default = CommentsController()
