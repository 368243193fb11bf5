import logging
import os

os.environ['LOG_LEVEL'] = 'CRITICAL'


class EnvironmentSetup:
    """
    Set environment variables.
    Provide a dict of variable names and values.
    Setting a value to None will delete it from the environment.
    Works as a context manager:

        with EnvironmentSetup({'LOG_LEVEL': 'debug'}):
            pass

    or use enter() and exit()  (e.g. in setUp() and tearDown() functions).
    """
    def __init__(self, env_vars_dict):
        self.env_vars = env_vars_dict
        self.saved_vars = {}
        self.logger = logging.getLogger('EnvironmentSetup')

    def enter(self):
        for k, v in self.env_vars.items():
            old_value = os.environ.get(k)
            self.saved_vars[k] = old_value
            if v:
                os.environ[k] = v
                self.logger.debug(f"temporarily changing {k} from {old_value} to {v}")
            elif k in os.environ:
                del os.environ[k]
                self.logger.debug(f"temporarily deleting {k}")

    def exit(self):
        for k, v in self.saved_vars.items():
            self.logger.debug(f"resetting {k} back to {v}")
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v

    def __enter__(self):
        self.enter()

    def __exit__(self, type, value, traceback):
        self.exit()
