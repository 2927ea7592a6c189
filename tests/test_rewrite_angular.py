"""Tests for the Angular generator (served as AngularJS 1.x)."""

from __future__ import annotations

from framework_preview import cdn
from framework_preview.classifier import classify
from framework_preview.model import FrameworkKind
from framework_preview.rewrite import render
from framework_preview.rewrite.angular import (
    CONTROLLER_NAME,
    MODULE_NAME,
    default_scaffold,
    render_angular,
    scope_statements,
    translate_template,
)
from framework_preview.rewrite.extract import extract_class_body


DECORATED = """@Component({
  selector: 'app-root',
  template: `<p>{{title}}</p>`
})
export class AppComponent {
  title = 'hi';
}
"""

COUNTER = """import { Component, OnInit } from '@angular/core';

@Component({
  selector: 'app-counter',
  template: `
    <h2>{{ title }}</h2>
    <input [(ngModel)]="name">
    <button (click)="increment()" [disabled]="count > 9">+</button>
    <li *ngFor="let item of items; let i = index">{{ item }}</li>
    <p *ngIf="count > 0">positive</p>
  `
})
export class CounterComponent implements OnInit {
  title = 'Counter';
  count = 0;
  items = ['a', 'b'];

  increment() {
    this.count++;
  }

  ngOnInit() {
    this.title = 'Ready';
  }
}
"""


class TestDecoratedComponent:
    """@Component classes become a $scope controller."""

    def test_classified_as_angular(self) -> None:
        assert classify(DECORATED).kind == FrameworkKind.ANGULAR

    def test_minimal_component(self) -> None:
        doc = render(DECORATED, classify(DECORATED))
        assert f'ng-controller="{CONTROLLER_NAME}"' in doc
        assert f'ng-app="{MODULE_NAME}"' in doc
        assert "$scope.title = 'hi';" in doc
        assert "<p>{{title}}</p>" in doc
        assert cdn.ANGULARJS in doc

    def test_methods_and_init(self) -> None:
        doc = render_angular(COUNTER)
        assert "$scope.increment = function() {\n$scope.count++;\n};" in doc
        assert "$scope.ngOnInit();" in doc
        assert "$scope.items = ['a', 'b'];" in doc
        assert "this." not in doc

    def test_template_translated(self) -> None:
        doc = render_angular(COUNTER)
        assert 'ng-model="name"' in doc
        assert 'ng-click="increment()"' in doc
        assert 'ng-disabled="count > 9"' in doc
        assert 'ng-repeat="item in items"' in doc
        assert 'ng-if="count > 0"' in doc
        assert "*ngFor" not in doc


class TestTranslateTemplate:
    """Binding syntax rewrites."""

    def test_event_binding(self) -> None:
        assert translate_template('<a (mouseover)="x()">') == '<a ng-mouseover="x()">'

    def test_plain_markup_untouched(self) -> None:
        html = "<p>{{ a }}</p>"
        assert translate_template(html) == html


class TestScopeStatements:
    """Seed statements always come first."""

    def test_seeded_counter(self) -> None:
        statements = scope_statements("")
        assert statements[0] == "$scope.title = 'Angular App';"
        assert "$scope.count = 0;" in statements
        assert "$scope.ngOnInit();" not in statements

    def test_class_property_overrides_seed(self) -> None:
        statements = scope_statements("title = 'Mine';")
        assert statements.index("$scope.title = 'Mine';") > statements.index(
            "$scope.title = 'Angular App';"
        )


class TestOtherShapes:
    """AngularJS snippets, full pages and unrecognised input."""

    def test_angularjs_markup_embedded(self) -> None:
        code = '<div ng-app="demo" ng-controller="Ctrl">{{ a }}</div>'
        doc = render_angular(code)
        assert code in doc
        assert cdn.ANGULARJS in doc

    def test_angularjs_script_wrapped(self) -> None:
        code = "angular.module('demo', []);"
        doc = render_angular(code)
        assert f"<script>\n{code}\n    </script>" in doc

    def test_modern_document_untouched(self) -> None:
        page = (
            "<!DOCTYPE html><html><head></head><body><app-root></app-root>"
            "<script type=\"module\">import { Component } from '@angular/core';\n"
            "@Component({ selector: 'app-root' }) class A {}</script></body></html>"
        )
        assert classify(page).kind == FrameworkKind.ANGULAR
        assert render(page, classify(page)) == page

    def test_angularjs_document_gets_cdn(self) -> None:
        page = "<!DOCTYPE html><html ng-app><head></head><body>{{ 1 + 1 }}</body></html>"
        doc = render_angular(page)
        assert cdn.ANGULARJS in doc

    def test_default_scaffold(self) -> None:
        doc = render_angular("*ngIf without anything else")
        assert doc == default_scaffold()
        assert "Welcome to AngularJS!" in doc


class TestMultiLineClassMembers:
    """Array and object properties become valid $scope assignments."""

    SOURCE = """@Component({
  template: `<li *ngFor="let fruit of items; let i = index">{{ i }}: {{ fruit }}</li>
  <p>{{ user.name }} {{ greeting }}</p>`
})
export class ListComponent {
  items = [
    'Apple',
    'Banana'
  ];
  user = {
    name: 'Ada'
  };
  greeting = 'Hi {';

  increment() {
    this.count++;
  }
}
"""

    def test_values_emitted_whole(self) -> None:
        statements = scope_statements(extract_class_body(self.SOURCE).fragment)
        assert "$scope.items = [\n    'Apple',\n    'Banana'\n  ];" in statements
        assert "$scope.user = {\n    name: 'Ada'\n  };" in statements
        assert "$scope.greeting = 'Hi {';" in statements
        assert "$scope.items = [;" not in statements

    def test_method_after_string_brace_kept(self) -> None:
        doc = render_angular(self.SOURCE)
        assert "$scope.increment = function() {\n$scope.count++;\n};" in doc

    def test_ng_for_index_alias(self) -> None:
        doc = render_angular(self.SOURCE)
        assert 'ng-repeat="fruit in items" ng-init="i = $index"' in doc


class TestNgForIndexAlias:
    """Both index alias spellings map onto $index."""

    def test_let_alias(self) -> None:
        html = translate_template('<li *ngFor="let x of xs; let n = index">')
        assert html == '<li ng-repeat="x in xs" ng-init="n = $index">'

    def test_as_alias(self) -> None:
        html = translate_template('<li *ngFor="let x of xs; index as n">')
        assert html == '<li ng-repeat="x in xs" ng-init="n = $index">'

    def test_no_alias(self) -> None:
        assert translate_template('<li *ngFor="let x of xs">') == '<li ng-repeat="x in xs">'
