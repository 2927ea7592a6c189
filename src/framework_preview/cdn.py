"""CDN builds the generated documents load at runtime."""

from __future__ import annotations

REACT_UMD = "https://unpkg.com/react@18/umd/react.production.min.js"
REACT_DOM_UMD = "https://unpkg.com/react-dom@18/umd/react-dom.production.min.js"
BABEL_STANDALONE = "https://unpkg.com/@babel/standalone/babel.min.js"
VUE_GLOBAL = "https://unpkg.com/vue@3/dist/vue.global.js"
ANGULARJS = "https://ajax.googleapis.com/ajax/libs/angularjs/1.8.2/angular.min.js"
ALPINE = "https://cdn.jsdelivr.net/npm/alpinejs@3.x.x/dist/cdn.min.js"
