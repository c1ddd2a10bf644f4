from django.apps import AppConfig


class BoardsConfig(AppConfig):
    name = 'presentation.boards'
    label = 'boards'
    verbose_name = 'Kitchen Boards'
