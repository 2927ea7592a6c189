"""Starter snippets offered when a user picks a framework from scratch."""

from __future__ import annotations

from framework_preview.model import FrameworkKind

REACT_TEMPLATE = """import React, { useState } from 'react';

function App() {
  const [count, setCount] = useState(0);

  return (
    <div style={{ padding: '20px', fontFamily: 'Arial' }}>
      <h1>React Counter App</h1>
      <p>Count: {count}</p>
      <button onClick={() => setCount(count + 1)}>
        Increment
      </button>
      <button onClick={() => setCount(count - 1)}>
        Decrement
      </button>
    </div>
  );
}

// Component will be auto-rendered"""

VUE_TEMPLATE = """<template>
  <div>
    <h1>{{ title }}</h1>
    <p>Count: {{ count }}</p>
    <button @click="increment">Increment</button>
    <button @click="decrement">Decrement</button>
  </div>
</template>

<script>
export default {
  data() {
    return {
      title: 'Vue Counter App',
      count: 0
    }
  },
  methods: {
    increment() {
      this.count++;
    },
    decrement() {
      this.count--;
    }
  }
}
</script>

<style>
div { padding: 20px; font-family: Arial; }
button { margin: 5px; }
</style>"""

ANGULAR_TEMPLATE = """@Component({
  selector: 'app-root',
  template: `
    <div style="padding: 20px; font-family: Arial;">
      <h1>{{ title }}</h1>
      <p>Count: {{ count }}</p>
      <button (click)="increment()">Increment</button>
      <button (click)="decrement()">Decrement</button>
    </div>
  `
})
export class AppComponent {
  title = 'Angular Counter App';
  count = 0;

  increment() {
    this.count++;
  }

  decrement() {
    this.count--;
  }
}"""

ALPINE_TEMPLATE = """<div x-data="{ count: 0, title: 'Alpine.js Counter App' }" style="padding: 20px; font-family: Arial;">
    <h1 x-text="title"></h1>
    <p>Count: <span x-text="count"></span></p>
    <button @click="count++" style="margin: 5px;">Increment</button>
    <button @click="count--" style="margin: 5px;">Decrement</button>
</div>"""

DEFAULT_HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>My Website</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
            margin: 0;
            padding: 20px;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
        }
        .container {
            background: white;
            padding: 2rem;
            border-radius: 10px;
            box-shadow: 0 10px 30px rgba(0,0,0,0.2);
            text-align: center;
            max-width: 500px;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>Welcome to Your Website!</h1>
        <p>Start coding with React, Vue, Angular, or plain HTML/JS!</p>
        <button onclick="alert('Hello World!')">Click Me!</button>
    </div>
</body>
</html>"""

TEMPLATES: dict[FrameworkKind, str] = {
    FrameworkKind.REACT: REACT_TEMPLATE,
    FrameworkKind.VUE: VUE_TEMPLATE,
    FrameworkKind.ANGULAR: ANGULAR_TEMPLATE,
    FrameworkKind.ALPINE: ALPINE_TEMPLATE,
}


def get_framework_template(kind: FrameworkKind | str) -> str:
    """Starter snippet for *kind*; anything without one gets the HTML welcome page."""
    try:
        return TEMPLATES.get(FrameworkKind(kind), DEFAULT_HTML_TEMPLATE)
    except ValueError:
        return DEFAULT_HTML_TEMPLATE
