from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response, abort
from freqs.engine import Engine
from freqs.errors import DecodeFormatError
from freqs import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = CFG.MAX_UPLOAD_BYTES
_engine: Engine = Engine()


def _payload() -> bytes:
    """Uploaded file (multipart field 'file') or the raw request body."""
    if request.mimetype == "multipart/form-data":
        f = request.files.get("file")
        if f is None:
            abort(400, description="multipart upload needs a 'file' field")
        return f.read()
    return request.get_data(cache=False)


@app.errorhandler(DecodeFormatError)
def on_decode_error(exc: DecodeFormatError):
    log.info("Rejected upload: %s", exc)
    return jsonify({"error": str(exc), "offset": exc.offset}), 400


# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True})


@app.post("/api/freqs")
def api_freqs():
    limit = request.args.get("limit", CFG.WEB_DEFAULT_LIMIT, type=int)
    result = _engine.count(_payload())
    rows = [{"count": c, "word": w} for c, w in result.entries(limit=limit)]
    return jsonify(rows)


@app.post("/api/report")
def api_report():
    result = _engine.count(_payload())
    return Response(result.to_bytes(), mimetype="text/plain; charset=utf-8")


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Word frequencies • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0 }
textarea{
  width:100%; min-height:160px; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:15px;
}
textarea:focus{ border-color:var(--accent) }
.btn{
  margin-top:10px; padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.err{ display:none; margin-top:12px; color:#ffb0b0 }
.row{
  display:grid; grid-template-columns:3rem 6rem 1fr; gap:10px;
  padding:8px 14px; border-top:1px solid var(--border);
}
.small{ color:var(--muted); font-variant-numeric:tabular-nums }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Word frequencies</h1>
      <textarea id="txt" placeholder="Paste text…" autofocus></textarea>
      <button id="go" class="btn">Count</button>
      <div id="stats" class="meta">Ready.</div>
      <div id="err" class="err"></div>
      <div id="out"></div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const esc = (s) => s.replace(/[&<>"]/g, (c)=>({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]));
async function count(){
  $("#err").style.display = "none";
  try{
    const resp = await fetch("/api/freqs", {method:"POST", body:$("#txt").value});
    const data = await resp.json();
    if(!resp.ok) throw new Error(data.error ?? `HTTP ${resp.status}`);
    $("#stats").textContent = `Words: ${data.length}`;
    $("#out").innerHTML = data.map((r,i)=>
      `<div class="row"><div class="small">${i+1}</div><div class="small">${r.count}</div><div>${esc(r.word)}</div></div>`
    ).join("");
  }catch(e){
    $("#err").style.display = "block";
    $("#err").textContent = `Error: ${e.message ?? e}`;
  }
}
$("#go").addEventListener("click", count);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the word frequency engine")
    ap.add_argument("--host", default=CFG.DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=CFG.DEFAULT_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(verbose=args.verbose)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
