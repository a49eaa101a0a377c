"""
Built-in model records shipped with the catalog.
"""

from types import MappingProxyType

from model_catalog.models.model_info import ModelInfo

DRAGON = ModelInfo(
    title="Chinese Dragon",
    download_filename="dragon.zip",
    download_size="17.4 MB",
    triangles=871306,
    vertices=438929,
    copyright="&copy; 1996 Stanford University",
    updated_date="2011-07-27",
    license="<a href='http://www.graphics.stanford.edu/data/3Dscanrep/'>Stanford Scan</a>",
    description="""<p>  I converted the PLY
        from <a href="http://www.cc.gatech.edu/projects/large_models/dragon.html">Georgia
        Tech</a> to IFS, and then computed vertex normals and wrote the result to OBJ format using custom code.
        This model is originally from the Stanford 3D Scanning
        Repository.  It was scanned from a real object by a Cyberware
        3030 MS scanner.  The model reconstructed from scans by
        Stanford contains fewer triangles and more vertices.  The
        Georgia Tech version may have been reconstructed independently
        from the original points.  As with many models on this page, I
        report the vertex count after merging co-located vertices with
        the same normals during load (i.e., the size that your vertex
        buffer will actually be in memory), so my vertex count is
        lower than the one reported by Georgia Tech, but my face count
        is identical.  The icon image is from <a href="http://www.geforce.com/#/Optimize/Guides/ambient-occlusion">NVIDIA</a>.</p>
     """,  # noqa: E501
)

# Keyed by model id, which is also the record's directory name in the archive
BUILTIN_RECORDS: "MappingProxyType[str, ModelInfo]" = MappingProxyType(
    {"dragon": DRAGON}
)
