from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

import searchable
from searchable.utils import get_like_operator, get_typename


class Command(BaseCommand):
    help = """Show searchable configuration for specified models.

Shows configuration for all searchable models if none specified. Models are
given as <app_label>.<ModelName>.

    """.strip()

    def add_arguments(self, parser):
        parser.add_argument('models', nargs='*', metavar='app_label.Model')

    def get_models(self, labels):
        if not labels:
            return sorted(searchable.registered_models(), key=get_typename)
        models = []
        for label in labels:
            try:
                model = apps.get_model(label)
            except (LookupError, ValueError):
                raise CommandError("Unknown model %r" % label)
            if searchable.get_searchable(model) is None:
                raise CommandError("Model %r is not searchable" % label)
            models.append(model)
        return models

    def show_config(self, models, verbose_out):
        for model in models:
            config = searchable.get_searchable(model)
            self.stdout.write("Configuration for model %s\n"
                              % get_typename(model))
            self.stdout.write(" - terms attributes: %s\n"
                              % (', '.join(config.terms_attributes)
                                 or '(none)'))
            self.stdout.write(" - attached as: %s\n"
                              % (config.attach_as or '(not attached)'))
            self.stdout.write(" - like operator: %s\n"
                              % get_like_operator(model, config))
            if verbose_out:
                verbose_out.write(" - searchable: %r\n" % config)
            self.stdout.write("\n")

    def handle(self, *args, **options):
        if options.get('verbosity', 1) >= 2:
            verbose_out = self.stdout
        else:
            verbose_out = None
        self.show_config(self.get_models(options['models']), verbose_out)
