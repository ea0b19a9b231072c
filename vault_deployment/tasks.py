import typing
from collections import OrderedDict
from typing import Any, Callable, List, NamedTuple, Sequence

from vault_deployment.environment import DeploymentEnvironment

TaskFunction = Callable[[DeploymentEnvironment], Any]


class DeployTask(NamedTuple):
    name: str
    function: TaskFunction
    tags: typing.Tuple[str, ...]
    dependencies: typing.Tuple[str, ...]


class TaskRegistry:
    """
    Deployment tasks addressable by tag.

    A task declares the tags it provides and the tags it depends on. Running a tag
    runs its dependencies first, each task at most once. A dependency that no
    registered task provides is assumed to be deployed already.
    """

    class Invalid(Exception):
        """Raised when requested tags or task dependencies cannot be resolved"""

    def __init__(self):
        self._tasks: typing.Dict[str, DeployTask] = OrderedDict()

    def task(self, tags: Sequence[str], dependencies: Sequence[str] = ()):
        """Registers the decorated function as a deployment task."""

        def decorator(function: TaskFunction) -> TaskFunction:
            name = function.__name__
            if name in self._tasks:
                raise self.Invalid(f"Task '{name}' is already registered")
            self._tasks[name] = DeployTask(
                name=name, function=function, tags=tuple(tags), dependencies=tuple(dependencies)
            )
            return function

        return decorator

    def tasks_for_tag(self, tag: str) -> List[DeployTask]:
        return [task for task in self._tasks.values() if tag in task.tags]

    def resolve(self, tags: Sequence[str]) -> List[DeployTask]:
        """Returns the tasks to run for `tags`, dependencies first."""
        ordered: typing.Dict[str, DeployTask] = OrderedDict()
        visiting: List[str] = list()

        def visit(task: DeployTask):
            if task.name in ordered:
                return
            if task.name in visiting:
                cycle = " -> ".join(visiting + [task.name])
                raise self.Invalid(f"Dependency cycle detected: {cycle}")
            visiting.append(task.name)
            for dependency in task.dependencies:
                for dependency_task in self.tasks_for_tag(dependency):
                    visit(dependency_task)
            visiting.pop()
            ordered[task.name] = task

        for tag in tags:
            tasks = self.tasks_for_tag(tag)
            if not tasks:
                raise self.Invalid(f"No deployment task registered for tag '{tag}'")
            for task in tasks:
                visit(task)

        return list(ordered.values())

    def run(self, environment: DeploymentEnvironment, tags: Sequence[str]) -> typing.Dict[str, Any]:
        """Runs the tasks for `tags` in dependency order and returns their results by name."""
        tasks = self.resolve(tags)
        for task in tasks:
            for dependency in task.dependencies:
                if not self.tasks_for_tag(dependency):
                    environment.log(
                        f"(i) No task provides '{dependency}'; assuming it is already deployed"
                    )

        results = OrderedDict()
        for task in tasks:
            environment.log(f"\nRunning {task.name} [{', '.join(task.tags)}]")
            results[task.name] = task.function(environment)
        return results


TASKS = TaskRegistry()
