"""Template targets for the avatars example.

    datadecorator process examples/avatars/rows.json -r examples/avatars/targets.py
"""


class Avatar:
    @staticmethod
    def getAvatarPath(name):
        return f"http://127.0.0.1/test/img/{name}.png"


class Profile:
    name = None


class ProfilePresenter:
    def __init__(self, model):
        self.model = model

    def presentHandle(self):
        return "@" + self.model.name.lower()


def register(registry):
    for target in (Avatar, Profile, ProfilePresenter):
        registry.register(target.__name__, target)
