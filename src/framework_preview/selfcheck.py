"""End-to-end self check over a handful of representative snippets.

Each case is classified and rendered; a case passes when the rendered
document declares a doctype and loads the CDN runtime of the detected
framework.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from framework_preview.model import FrameworkKind
from framework_preview.rewrite import preview

logger = logging.getLogger(__name__)

# Substring that proves the runtime for a kind was loaded.
_CDN_PROBES = {
    FrameworkKind.REACT: "unpkg.com/react",
    FrameworkKind.VUE: "vue.global.js",
    FrameworkKind.ANGULAR: "angular.min.js",
    FrameworkKind.ALPINE: "alpinejs",
}


@dataclass(frozen=True, slots=True)
class SelfCheckCase:
    name: str
    code: str


@dataclass(frozen=True, slots=True)
class SelfCheckResult:
    name: str
    detected: FrameworkKind
    cdn_included: bool
    success: bool

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "detected": self.detected.value,
            "cdn_included": self.cdn_included,
            "success": self.success,
        }


DEFAULT_CASES = (
    SelfCheckCase(
        name="React with Hooks",
        code="""function App() {
      const [count, setCount] = React.useState(0);
      return (
        <div>
          <h1>React Test</h1>
          <p>Count: {count}</p>
          <button onClick={() => setCount(count + 1)}>+</button>
        </div>
      );
    }""",
    ),
    SelfCheckCase(
        name="Vue 3 Composition",
        code="""<div id="app">
      <h1>{{ title }}</h1>
      <button @click="count++">Count: {{ count }}</button>
    </div>
    <script>
    const { createApp } = Vue;
    createApp({
      data() {
        return { title: 'Vue Test', count: 0 }
      }
    }).mount('#app');
    </script>""",
    ),
    SelfCheckCase(
        name="Angular/AngularJS",
        code="""<div ng-app="testApp" ng-controller="MainCtrl">
      <h1>{{ title }}</h1>
      <button ng-click="increment()">Count: {{ count }}</button>
    </div>
    <script>
    angular.module('testApp', [])
      .controller('MainCtrl', function($scope) {
        $scope.title = 'Angular Test';
        $scope.count = 0;
        $scope.increment = function() { $scope.count++; };
      });
    </script>""",
    ),
    SelfCheckCase(
        name="Alpine.js",
        code="""<div x-data="{ count: 0, title: 'Alpine Test' }">
      <h1 x-text="title"></h1>
      <button @click="count++">Count: <span x-text="count"></span></button>
    </div>""",
    ),
)


def check_case(case: SelfCheckCase) -> SelfCheckResult:
    verdict, document = preview(case.code)
    probe = _CDN_PROBES.get(verdict.kind)
    cdn_included = probe is not None and probe in document
    success = cdn_included and "<!DOCTYPE" in document
    logger.debug(f"{case.name}: detected={verdict.kind.value} cdn={cdn_included} success={success}")
    return SelfCheckResult(
        name=case.name,
        detected=verdict.kind,
        cdn_included=cdn_included,
        success=success,
    )


def run_self_check(cases: tuple[SelfCheckCase, ...] = DEFAULT_CASES) -> list[SelfCheckResult]:
    return [check_case(case) for case in cases]
