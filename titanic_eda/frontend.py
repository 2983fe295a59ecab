"""Self-contained page: upload form, preview table and Chart.js canvases."""

FRONTEND_HTML = """<!DOCTYPE html>
<html lang="en"><head>
<meta charset="UTF-8"/><meta name="viewport" content="width=device-width,initial-scale=1"/>
<title>Titanic EDA</title>
<script src="https://cdn.jsdelivr.net/npm/chart.js@4"></script>
<style>
*{box-sizing:border-box;margin:0;padding:0}
:root{--navy:#050d1a;--panel:#0a1f3a;--border:#1a3a5c;--gold:#c9a227;--blue:#1f8fff;--red:#e05c5c;--text:#e8edf5;--muted:#7a9bbf}
html,body{min-height:100vh;background:var(--navy);color:var(--text);font-family:system-ui,sans-serif}
#app{max-width:1200px;margin:0 auto;padding:2rem 1.5rem}
h1{color:var(--gold);font-size:2.2rem;letter-spacing:.04em;text-align:center;margin-bottom:.4rem}
.subtitle{color:var(--muted);font-size:.8rem;letter-spacing:.2em;text-transform:uppercase;text-align:center;margin-bottom:2rem}
.toolbar{display:flex;gap:.75rem;align-items:center;flex-wrap:wrap;background:var(--panel);border:1px solid var(--border);border-radius:12px;padding:1rem 1.2rem}
.btn{background:rgba(31,143,255,.15);border:1px solid var(--blue);color:var(--blue);padding:.45rem 1.1rem;border-radius:20px;cursor:pointer;font-size:.8rem}
.btn:hover{background:rgba(31,143,255,.3)}
input[type=file]{color:var(--muted);font-size:.8rem}
.sec-title{color:var(--gold);font-size:1.2rem;margin:2rem 0 .8rem}
.tbl-wrap{overflow-x:auto;border:1px solid var(--border);border-radius:10px}
table{width:100%;border-collapse:collapse;font-size:.78rem}
th{background:var(--panel);color:var(--muted);text-align:left;padding:.6rem .8rem;text-transform:uppercase;font-size:.68rem;letter-spacing:.06em}
td{padding:.5rem .8rem;border-top:1px solid rgba(26,58,92,.5)}
.charts-row{display:grid;grid-template-columns:repeat(auto-fit,minmax(320px,1fr));gap:1rem}
.chart-card{background:#fff;border-radius:12px;padding:1rem}
#result{margin-top:1rem;padding:1rem 1.2rem;border-left:3px solid var(--red);background:var(--panel);border-radius:6px;min-height:1rem}
#result:empty{display:none}
</style></head><body>
<div id="app">
<h1>Titanic EDA</h1><p class="subtitle">Who survived, and why</p>
<div class="toolbar">
  <input type="file" id="trainFile" accept=".csv"/>
  <button class="btn" id="loadBtn">Load</button>
  <button class="btn" id="analyzeBtn">Find strongest factor</button>
</div>
<div id="result"></div>
<div class="sec-title">Preview</div>
<div class="tbl-wrap" id="dataPreview"></div>
<div class="sec-title">Missing values</div>
<div class="chart-card"><canvas id="missingChart"></canvas></div>
<div class="sec-title">Survival</div>
<div class="charts-row">
  <div class="chart-card"><canvas id="sexChart"></canvas></div>
  <div class="chart-card"><canvas id="pclassChart"></canvas></div>
  <div class="chart-card"><canvas id="ageChart"></canvas></div>
  <div class="chart-card"><canvas id="embarkedChart"></canvas></div>
</div>
</div>
<script>
const charts={};
function draw(id,cfg){if(charts[id])charts[id].destroy();charts[id]=new Chart(document.getElementById(id),cfg)}

async function post(path,body){
  const r=await fetch(path,{method:'POST',body});
  const d=await r.json().catch(()=>({}));
  if(!r.ok)throw new Error(d.detail||r.status);
  return d}

function renderPreview(p){
  const t=document.createElement('table'),hr=t.insertRow();
  p.columns.forEach(c=>{const th=document.createElement('th');th.textContent=c;hr.appendChild(th)});
  p.rows.forEach(r=>{const tr=t.insertRow();p.columns.forEach(c=>{tr.insertCell().textContent=r[c]??''})});
  const el=document.getElementById('dataPreview');el.innerHTML='';el.appendChild(t)}

document.getElementById('loadBtn').addEventListener('click',async()=>{
  const f=document.getElementById('trainFile').files[0];
  if(!f){alert('Please upload train.csv');return}
  const fd=new FormData();fd.append('file',f);
  try{
    const d=await post('/api/load',fd);
    document.getElementById('result').textContent='';
    renderPreview(d.preview);
    draw('missingChart',d.missing_chart);
    Object.entries(d.survival_charts).forEach(([k,cfg])=>draw(k+'Chart',cfg));
  }catch(e){alert(e.message)}});

document.getElementById('analyzeBtn').addEventListener('click',async()=>{
  try{document.getElementById('result').textContent=(await post('/api/analyze')).message}
  catch(e){alert(e.message)}});
</script>
</body></html>
"""
