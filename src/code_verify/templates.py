"""HTML templates for the web interface."""

import json

HTML_INDEX = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Verify Your Code</title>
  <style>
    body {
      margin: 0;
      min-height: 100vh;
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      background: #f3f4f6;
      font-family: system-ui, sans-serif;
    }
    h1 { font-size: 20px; color: #1f2937; margin-bottom: 16px; }
    form { display: flex; flex-direction: column; align-items: center; }
    .cells { display: flex; gap: 8px; margin-bottom: 16px; }
    .cell {
      width: 48px;
      height: 48px;
      text-align: center;
      font-size: 20px;
      border: 1px solid #d1d5db;
      border-radius: 6px;
      outline: none;
    }
    .cell:focus { box-shadow: 0 0 0 2px #3b82f6; }
    .cell.invalid { border-color: #ef4444; }
    .cell.invalid:focus { box-shadow: 0 0 0 2px #ef4444; }
    button {
      margin-top: 16px;
      padding: 8px 24px;
      background: #3b82f6;
      color: #fff;
      border: none;
      border-radius: 4px;
      cursor: pointer;
    }
    button:hover { background: #2563eb; }
    .error { margin-top: 16px; color: #ef4444; }
    .success { margin-top: 16px; color: #22c55e; }
  </style>
</head>
<body>
  <h1>Verify Your Code</h1>
  <form id="verify-form">
    <div class="cells" id="cells"></div>
    <button type="submit">Submit</button>
  </form>
  <p id="error" class="error" hidden></p>
  <p id="success" class="success" hidden></p>

  <script>
    const API_BASE_URL = __API_BASE_URL__;
    const CELL_COUNT = 6;

    const state = {
      cells: Array.from({length: CELL_COUNT}, () => ({value: '', error: false})),
      focus: 0,
      error: '',
      success: '',
      submitting: false,
    };

    const cellsEl = document.getElementById('cells');
    const inputs = [];

    function isDigit(v) { return /^[0-9]$/.test(v); }

    function render(moveFocus) {
      state.cells.forEach((cell, i) => {
        inputs[i].value = cell.value;
        inputs[i].classList.toggle('invalid', cell.error);
      });
      const errorEl = document.getElementById('error');
      const successEl = document.getElementById('success');
      errorEl.textContent = state.error;
      errorEl.hidden = !state.error;
      successEl.textContent = state.success;
      successEl.hidden = !state.success;
      if (moveFocus) { inputs[state.focus].focus(); }
    }

    function enter(i, value) {
      value = value.slice(0, 1);
      state.cells[i] = {value: value, error: !isDigit(value)};
      if (isDigit(value) && i < CELL_COUNT - 1) { state.focus = i + 1; }
    }

    function backspace(i) {
      state.cells[i] = {value: '', error: false};
      if (i > 0) { state.focus = i - 1; }
    }

    function paste(text) {
      if (!/^[0-9]{1,6}$/.test(text)) {
        state.error = 'Please paste up to 6 digits.';
        return;
      }
      state.error = '';
      text.split('').forEach((ch, i) => { state.cells[i] = {value: ch, error: false}; });
      state.focus = Math.min(text.length - 1, CELL_COUNT - 1);
    }

    async function submit() {
      if (state.submitting) { return; }
      state.error = '';
      state.success = '';
      state.cells.forEach(cell => { cell.error = !isDigit(cell.value); });
      if (state.cells.some(cell => cell.error)) {
        state.error = 'Please enter valid 6 digits.';
        return;
      }
      state.submitting = true;
      let body;
      try {
        const res = await fetch(API_BASE_URL + '/api/verify', {
          method: 'POST',
          headers: {'Content-Type': 'application/json'},
          body: JSON.stringify({code: state.cells.map(c => c.value).join('')}),
        });
        if (res.status >= 500) { throw new Error('status ' + res.status); }
        body = await res.json();
        if (typeof body.success !== 'boolean') { throw new Error('malformed body'); }
      } catch (err) {
        state.error = 'Verification error.';
        return;
      } finally {
        state.submitting = false;
      }
      if (body.success) {
        state.success = 'Verification successful!';
        state.cells.forEach(cell => { cell.value = ''; cell.error = false; });
      } else {
        state.error = 'Verification failed.';
      }
    }

    for (let i = 0; i < CELL_COUNT; i++) {
      const input = document.createElement('input');
      input.type = 'text';
      input.maxLength = 1;
      input.className = 'cell';
      input.addEventListener('input', e => { enter(i, e.target.value); render(true); });
      input.addEventListener('keydown', e => {
        if (e.key === 'Backspace') { e.preventDefault(); backspace(i); render(true); }
      });
      input.addEventListener('focus', () => { state.focus = i; });
      cellsEl.appendChild(input);
      inputs.push(input);
    }

    cellsEl.addEventListener('paste', e => {
      e.preventDefault();
      paste(e.clipboardData.getData('text'));
      render(true);
    });

    document.getElementById('verify-form').addEventListener('submit', async e => {
      e.preventDefault();
      const pending = submit();
      render(false);
      await pending;
      render(false);
    });

    render(false);
  </script>
</body>
</html>
"""


def render_index(api_base_url: str) -> str:
    """Return the code entry page bound to ``api_base_url``."""
    return HTML_INDEX.replace("__API_BASE_URL__", json.dumps(api_base_url.rstrip("/")))
