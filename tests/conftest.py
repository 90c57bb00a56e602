"""Shared fixtures: sample modules and source trees."""

from pathlib import Path

import pytest

COUNTER_SOURCE = """import React, { useState } from 'react';

interface CounterProps {
  initialValue?: number;
  step?: number;
}

export default function Counter({ initialValue = 0, step = 1 }: CounterProps) {
  const [count, setCount] = useState(initialValue);

  const increment = () => setCount(prev => prev + step);

  return (
    <div className="counter">
      <h2>Counter: {count}</h2>
      <button onClick={increment}>+</button>
    </div>
  );
}
"""

HEADER_SOURCE = """import React from 'react';

interface Props {
  title: string;
}

export default function Header(props: Props) {
  return <h1>{props.title}</h1>;
}
"""

MATH_SOURCE = """export function add(a: number, b: number): number {
  return a + b;
}

export const multiply = (a: number, b: number): number => a * b;
"""

HOOK_SOURCE = """import { useState, useEffect } from 'react';

export function useLocalStorage<T>(
  key: string,
  initialValue: T
) {
  const [value, setValue] = useState<T>(initialValue);

  useEffect(() => {
    window.localStorage.setItem(key, JSON.stringify(value));
  }, [key, value]);

  const setStoredValue = (newValue: T) => {
    setValue(newValue);
  };

  return { value, setValue: setStoredValue };
}
"""


@pytest.fixture
def counter_source() -> str:
    return COUNTER_SOURCE


@pytest.fixture
def header_source() -> str:
    return HEADER_SOURCE


@pytest.fixture
def math_source() -> str:
    return MATH_SOURCE


@pytest.fixture
def hook_source() -> str:
    return HOOK_SOURCE


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """
    A small project layout:

        src/components/Counter.tsx
        src/utils/math.ts           (math.test.ts exists)
        src/hooks/useLocalStorage.ts
        src/app.config.ts
        src/node_modules/lib/index.js
        src/dist/bundle.js
    """
    src = tmp_path / "src"
    files = {
        "components/Counter.tsx": COUNTER_SOURCE,
        "utils/math.ts": MATH_SOURCE,
        "utils/math.test.ts": "// existing test\n",
        "hooks/useLocalStorage.ts": HOOK_SOURCE,
        "app.config.ts": "export default { debug: true };\n",
        "node_modules/lib/index.js": "module.exports = {};\n",
        "dist/bundle.js": "console.log('built');\n",
        "styles/main.css": "body { margin: 0; }\n",
    }
    for relative, content in files.items():
        path = src / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return src
